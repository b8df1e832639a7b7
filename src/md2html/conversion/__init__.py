"""Conversion pipeline helpers."""

from .core import (
    Renderer,
    RendererFactory,
    generate_filename,
    parse_frontmatter,
    read_lines,
    run_conversion,
    safe_render,
)

__all__ = [
    "Renderer",
    "RendererFactory",
    "generate_filename",
    "parse_frontmatter",
    "read_lines",
    "run_conversion",
    "safe_render",
]
