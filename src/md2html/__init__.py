"""Markdown to HTML conversion for live preview and export."""

from .escaping import escape_html
from .renderers import DocumentRenderer, HtmlRenderer, export_html, render

__all__ = ["DocumentRenderer", "HtmlRenderer", "escape_html", "export_html", "render"]
