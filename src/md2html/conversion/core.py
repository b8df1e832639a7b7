from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from ..errors import RenderError
from ..escaping import escape_html
from ..models import FrontMatter


FRONTMATTER_PATTERN = re.compile(r"^---\s*$")
KEY_VALUE_PATTERN = re.compile(r"^\s*([A-Za-z_][\w-]*)\s*:(.*)$")
WIDTH_PATTERN = re.compile(r"^(\d+)\s*(?:px)?$", re.IGNORECASE)
TRUE_WORDS = {"true", "yes", "1", "on"}
FALSE_WORDS = {"false", "no", "0", "off"}
ERROR_PLACEHOLDER = '<div class="render-error">Preview failed: {message}</div>'
FILENAME_PREFIX = "markdown-document"

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, text: str) -> str:
        ...


class RendererFactory(Protocol):
    def __call__(self, *, frontmatter: FrontMatter, **kwargs: Any) -> Renderer:
        ...


def _parse_width(value: Optional[str], default: int) -> int:
    """Read a page width in pixels: ``800`` or ``800px``."""
    if value is None:
        return default
    match = WIDTH_PATTERN.match(value.strip())
    return int(match.group(1)) if match else default


def _parse_flag(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    lowered = _strip_quotes(value).lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    return default


def parse_frontmatter(lines: List[str]) -> Tuple[FrontMatter, List[str]]:
    """Split a leading ``---`` block of ``key: value`` lines off ``lines``.

    An unterminated block, or one holding anything but ``key: value`` lines,
    is treated as ordinary content. Unknown keys are ignored; values that
    fail to parse fall back to the defaults.
    """
    if not lines or not FRONTMATTER_PATTERN.match(lines[0]):
        return FrontMatter(), lines
    values: Dict[str, str] = {}
    idx = 1
    while idx < len(lines):
        if FRONTMATTER_PATTERN.match(lines[idx]):
            break
        line = lines[idx].strip()
        if line:
            match = KEY_VALUE_PATTERN.match(line)
            if not match:
                # A rule-delimited Markdown section, not configuration.
                return FrontMatter(), lines
            values[match.group(1).lower()] = match.group(2).strip()
        idx += 1
    if idx >= len(lines):
        return FrontMatter(), lines
    remaining = lines[idx + 1 :]
    defaults = FrontMatter()
    fm = FrontMatter(
        title=_strip_quotes(values.get("title", "")) or defaults.title,
        lang=_strip_quotes(values.get("lang", "")) or defaults.lang,
        include_style=_parse_flag(values.get("include_style"), defaults.include_style),
        max_width=_parse_width(values.get("max_width"), defaults.max_width),
    )
    logger.debug("Parsed front matter %s (%d lines)", fm, idx + 1)
    return fm, remaining


def _strip_quotes(value: str) -> str:
    trimmed = value.strip()
    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in {"'", '"'}:
        trimmed = trimmed[1:-1].strip()
    return trimmed


def read_lines(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as handle:
        return handle.readlines()


def run_conversion(
    lines: Iterable[str],
    *,
    frontmatter: FrontMatter,
    renderer_factory: RendererFactory,
    renderer_options: Optional[Dict[str, Any]] = None,
) -> str:
    """Build a renderer and run it over ``lines``.

    Option errors raised by the factory propagate unchanged. Anything raised
    while rendering is re-raised as :class:`RenderError`.
    """
    renderer = renderer_factory(frontmatter=frontmatter, **(renderer_options or {}))
    text = "".join(line if line.endswith("\n") else f"{line}\n" for line in lines)
    try:
        html = renderer.render(text)
    except Exception as exc:
        raise RenderError(f"Failed to render document: {exc}") from exc
    logger.debug("Rendered %d characters of Markdown into %d characters of HTML", len(text), len(html))
    return html


def safe_render(renderer: Renderer, text: str) -> str:
    """Render for a live preview surface.

    A fault never leaks partial output: the whole result is replaced by a
    visible error block and the caller's buffer is left alone.
    """
    try:
        return renderer.render(text)
    except Exception as exc:
        logger.exception("Preview rendering failed")
        return ERROR_PLACEHOLDER.format(message=escape_html(str(exc) or type(exc).__name__))


def generate_filename(extension: str, now: Optional[datetime] = None) -> str:
    moment = now or datetime.now(timezone.utc)
    suffix = extension if extension.startswith(".") else f".{extension}"
    return f"{FILENAME_PREFIX}-{moment.strftime('%Y-%m-%dT%H-%M-%S')}{suffix}"
