from __future__ import annotations

from md2html import escape_html


def test_escape_html_replaces_all_five_characters() -> None:
    assert escape_html("<b>&") == "&lt;b&gt;&amp;"
    assert escape_html("\"it's\"") == "&quot;it&#39;s&quot;"


def test_escape_html_leaves_plain_text_alone() -> None:
    assert escape_html("plain text") == "plain text"
    assert escape_html("") == ""


def test_escape_html_is_not_idempotent() -> None:
    once = escape_html("&")
    assert once == "&amp;"
    assert escape_html(once) == "&amp;amp;"
