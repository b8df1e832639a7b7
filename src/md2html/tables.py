from __future__ import annotations

import re
from typing import Callable, List, Optional, Tuple

from .models import Alignment, Table
from .protect import TABLE_TOKEN
from .rules import apply_inline


SEPARATOR_RE = re.compile(r"^\|?\s*:?-+:?\s*(?:\|\s*:?-+:?\s*)*\|?$")
CELL_SPLIT_RE = re.compile(r"(?<!\\)\|")
TABLE_PLACEHOLDER_RE = re.compile(r"\u0000TABLE(\d+)\u0000")

InlineRenderer = Callable[[str], str]


def is_table_row(line: str) -> bool:
    """A framed row: opens or closes with an unescaped pipe."""
    stripped = line.strip()
    return stripped.startswith("|") or (stripped.endswith("|") and not stripped.endswith("\\|"))


def starts_table(lines: List[str], index: int) -> bool:
    """Whether ``lines[index]`` is a header row with a separator right below it."""
    if index + 1 >= len(lines) or "|" not in lines[index]:
        return False
    separator = lines[index + 1].strip()
    return "|" in separator and bool(SEPARATOR_RE.match(separator))


def _continues_table(line: str, framed: bool) -> bool:
    # Body rows keep the header's shape; unframed tables accept any pipe line.
    if framed:
        return is_table_row(line)
    return "|" in line


def transform_tables(text: str, inline: InlineRenderer = apply_inline) -> Tuple[str, List[str]]:
    """Replace every qualifying pipe table with a placeholder.

    Returns the rewritten text and the rendered tables, indexed by the
    placeholder number. A table starts only at a pipe line whose next line is
    an alignment separator; pipe lines elsewhere are passed through untouched.
    """
    lines = text.split("\n")
    output: List[str] = []
    tables: List[str] = []
    index = 0
    while index < len(lines):
        if not starts_table(lines, index):
            output.append(lines[index])
            index += 1
            continue
        framed = is_table_row(lines[index])
        end = index + 2
        while end < len(lines) and _continues_table(lines[end], framed):
            end += 1
        table = parse_table(lines[index:end])
        if table is None:
            output.extend(lines[index:end])
        else:
            tables.append(render_table(table, inline))
            output.append(TABLE_TOKEN.format(index=len(tables) - 1))
        index = end
    return "\n".join(output), tables


def restore_tables(html: str, tables: List[str]) -> str:
    return TABLE_PLACEHOLDER_RE.sub(lambda match: tables[int(match.group(1))], html)


def parse_table(lines: List[str]) -> Optional[Table]:
    if len(lines) < 2 or not SEPARATOR_RE.match(lines[1].strip()):
        return None
    headers = split_cells(lines[0])
    alignments = [parse_alignment(marker) for marker in split_cells(lines[1])]
    rows: List[List[str]] = []
    for line in lines[2:]:
        cells = split_cells(line)[: len(headers)]
        if cells:
            rows.append(cells)
    return Table(headers=headers, alignments=alignments, rows=rows)


def split_cells(line: str) -> List[str]:
    stripped = line.strip()
    if stripped.startswith("|"):
        stripped = stripped[1:]
    if stripped.endswith("|") and not stripped.endswith("\\|"):
        stripped = stripped[:-1]
    return [cell.strip().replace("\\|", "|") for cell in CELL_SPLIT_RE.split(stripped)]


def parse_alignment(marker: str) -> Alignment:
    marker = marker.strip()
    if len(marker) > 1 and marker.startswith(":") and marker.endswith(":"):
        return Alignment.CENTER
    if marker.endswith(":"):
        return Alignment.RIGHT
    return Alignment.LEFT


def render_table(table: Table, inline: InlineRenderer = apply_inline) -> str:
    parts = ['<table class="markdown-table">', "<thead>", "<tr>"]
    for column, header in enumerate(table.headers):
        parts.append(f"<th{_align_attribute(table.alignment_for(column))}>{inline(header)}</th>")
    parts.extend(["</tr>", "</thead>", "<tbody>"])
    for row in table.rows:
        parts.append("<tr>")
        for column, cell in enumerate(row):
            parts.append(f"<td{_align_attribute(table.alignment_for(column))}>{inline(cell)}</td>")
        parts.append("</tr>")
    parts.extend(["</tbody>", "</table>"])
    return "\n".join(parts)


def _align_attribute(alignment: Alignment) -> str:
    # Left is the browser default.
    if alignment is Alignment.LEFT:
        return ""
    return f' style="text-align: {alignment.value}"'
