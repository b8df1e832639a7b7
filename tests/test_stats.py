from __future__ import annotations

from md2html.models import DocumentStats
from md2html.stats import document_stats


def test_counts_words_and_characters() -> None:
    text = "Hello brave  new\nworld"

    assert document_stats(text) == DocumentStats(words=4, characters=len(text))


def test_empty_text() -> None:
    assert document_stats("") == DocumentStats(words=0, characters=0)
    assert document_stats("   \n").words == 0
