"""Bundled renderer implementations."""

from .document import DocumentRenderer, export_html
from .html import HtmlRenderer, render

__all__ = ["DocumentRenderer", "HtmlRenderer", "export_html", "render"]
