from __future__ import annotations

from .models import DocumentStats


def document_stats(text: str) -> DocumentStats:
    """Count whitespace-separated words and raw characters, as the editor status bar shows them."""
    return DocumentStats(words=len(text.split()), characters=len(text))
