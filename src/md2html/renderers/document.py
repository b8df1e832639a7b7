from __future__ import annotations

from typing import Any, Optional

from ..conversion.core import _parse_flag, _parse_width
from ..errors import DuplicateRendererError
from ..escaping import escape_html
from ..models import FrontMatter
from ..plugins import register_renderer
from .html import HtmlRenderer


STYLESHEET = """    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6;
            max-width: {max_width}px;
            margin: 0 auto;
            padding: 2rem;
            color: #333;
        }}
        h1, h2 {{ border-bottom: 1px solid #eee; padding-bottom: 0.3rem; }}
        code {{
            background-color: #f6f8fa;
            padding: 0.2em 0.4em;
            border-radius: 3px;
            font-family: 'Consolas', 'Monaco', monospace;
        }}
        pre {{
            background-color: #f6f8fa;
            padding: 1rem;
            border-radius: 6px;
            overflow-x: auto;
        }}
        blockquote {{
            border-left: 4px solid #dfe2e5;
            padding-left: 1rem;
            color: #6a737d;
        }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ border: 1px solid #dfe2e5; padding: 0.5rem; text-align: left; }}
        th {{ background-color: #f6f8fa; }}
        .task-list {{ list-style: none; padding-left: 1rem; }}
    </style>
"""

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
{style}</head>
<body>
{body}
</body>
</html>
"""


class DocumentRenderer:
    """Wrap the rendered fragment in a standalone HTML page for export."""

    def __init__(
        self,
        frontmatter: Optional[FrontMatter] = None,
        *,
        fragment_renderer: Optional[HtmlRenderer] = None,
    ) -> None:
        self.frontmatter = frontmatter or FrontMatter()
        self.fragment_renderer = fragment_renderer or HtmlRenderer()

    def render(self, text: Optional[str]) -> str:
        fm = self.frontmatter
        style = STYLESHEET.format(max_width=fm.max_width) if fm.include_style else ""
        return DOCUMENT_TEMPLATE.format(
            lang=escape_html(fm.lang),
            title=escape_html(fm.title),
            style=style,
            body=self.fragment_renderer.render(text),
        )


def export_html(text: Optional[str], frontmatter: Optional[FrontMatter] = None) -> str:
    return DocumentRenderer(frontmatter).render(text)


def _document_renderer_factory(*, frontmatter: FrontMatter, **options: Any) -> DocumentRenderer:
    # Command-line options arrive as strings and override the front matter.
    effective = FrontMatter(
        title=str(options.get("title", frontmatter.title)),
        lang=str(options.get("lang", frontmatter.lang)),
        include_style=_parse_flag(_as_text(options.get("include_style")), frontmatter.include_style),
        max_width=_parse_width(_as_text(options.get("max_width")), frontmatter.max_width),
    )
    return DocumentRenderer(effective)


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


try:
    register_renderer("document", _document_renderer_factory)
except DuplicateRendererError:
    pass
