"""
Convert Markdown into an HTML fragment or a standalone HTML page.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from . import renderers  # noqa: F401  # register bundled renderer plugins
from .conversion import generate_filename, parse_frontmatter, read_lines, run_conversion
from .errors import RenderError
from .models import FrontMatter
from .plugins import available_renderers, get_renderer_factory
from .stats import document_stats


logger = logging.getLogger(__name__)


def _split_option(token: str) -> Tuple[str, str]:
    if "=" not in token:
        raise argparse.ArgumentTypeError("Expected KEY=VALUE format.")
    key, value = token.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Option key cannot be empty.")
    return key, value


def convert_markdown(
    lines: Iterable[str],
    *,
    frontmatter: FrontMatter,
    renderer_name: str = "html",
    renderer_options: Optional[Dict[str, Any]] = None,
) -> str:
    renderer_factory = get_renderer_factory(renderer_name)
    return run_conversion(
        lines,
        frontmatter=frontmatter,
        renderer_factory=renderer_factory,
        renderer_options=renderer_options,
    )


def read_input(source: str) -> List[str]:
    if source == "-":
        return sys.stdin.readlines()
    return read_lines(Path(source))


def write_output(path: Optional[Path], html: str) -> Optional[Path]:
    content = html if html.endswith("\n") else html + "\n"
    if path is None:
        sys.stdout.write(content)
        return None
    if path.is_dir():
        path = path / generate_filename(".html")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", path)
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="md2html", description="Convert Markdown files to HTML.")
    parser.add_argument("input_path", help="Path to the Markdown input file, or '-' to read stdin.")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="File to write the HTML to. A directory gets a timestamped file name. Defaults to stdout.",
    )
    parser.add_argument(
        "--renderer",
        default="html",
        choices=available_renderers() or ["html"],
        help="Name of the renderer plugin to use (default: html).",
    )
    parser.add_argument(
        "--renderer-option",
        action="append",
        default=[],
        type=_split_option,
        metavar="KEY=VALUE",
        help="Additional renderer option in KEY=VALUE form (may repeat).",
    )
    parser.add_argument("--stats", action="store_true", help="Print word and character counts to stderr.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        lines = read_input(args.input_path)
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    frontmatter, content = parse_frontmatter(lines)
    renderer_options = dict(args.renderer_option or [])
    try:
        html = convert_markdown(
            content,
            frontmatter=frontmatter,
            renderer_name=args.renderer,
            renderer_options=renderer_options or None,
        )
    except RenderError as exc:
        if args.verbose:
            logger.exception("Rendering failed")
        sys.stderr.write(f"{exc}\n")
        return 1
    except (KeyError, TypeError, ValueError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    if args.stats:
        stats = document_stats("".join(content))
        sys.stderr.write(f"{stats.words} words, {stats.characters} characters\n")
    try:
        write_output(args.output, html)
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
