from __future__ import annotations

from md2html import DocumentRenderer, export_html
from md2html.models import FrontMatter
from md2html.plugins import get_renderer_factory


def test_export_wraps_fragment_in_full_document() -> None:
    html = export_html("# Title\n\nBody")

    assert html.startswith("<!DOCTYPE html>\n<html lang=\"en\">")
    assert "<title>Markdown Document</title>" in html
    assert "<style>" in html
    assert "<body>\n<h1>Title</h1>\n\n<p>Body</p>\n</body>" in html
    assert html.rstrip().endswith("</html>")


def test_export_escapes_title_and_honours_style_toggle() -> None:
    html = export_html("x", FrontMatter(title="A & <B>", include_style=False))

    assert "<title>A &amp; &lt;B&gt;</title>" in html
    assert "<style>" not in html


def test_export_uses_max_width() -> None:
    html = DocumentRenderer(FrontMatter(max_width=640)).render("x")

    assert "max-width: 640px;" in html


def test_document_factory_options_override_frontmatter() -> None:
    factory = get_renderer_factory("document")

    renderer = factory(
        frontmatter=FrontMatter(title="From file", lang="de"),
        title="From CLI",
        include_style="off",
        max_width="720",
    )

    html = renderer.render("x")
    assert "<title>From CLI</title>" in html
    assert '<html lang="de">' in html
    assert "<style>" not in html


def test_empty_document_still_has_shell() -> None:
    html = export_html("")

    assert "<body>\n\n</body>" in html
