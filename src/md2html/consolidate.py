from __future__ import annotations

import re


LIST_BOUNDARY_RE = re.compile(r'</(ul|ol)>\s*(<(ul|ol)(?: class="task-list")?>)')
LIST_OPENING_RE = re.compile(r"<(?:ul|ol)[^>]*>")
BLOCKQUOTE_BOUNDARY_RE = re.compile(r"</blockquote>\s*<blockquote>")


def consolidate_lists(html: str) -> str:
    """Merge adjacent one-item list fragments of the same kind.

    Fragments are flat, so the nearest opening tag before a closing tag is
    its own. Plain and task lists are kept apart.
    """

    def merge(match: re.Match[str]) -> str:
        closing, following, following_tag = match.groups()
        if closing != following_tag:
            return match.group(0)
        start = html.rfind(f"<{closing}", 0, match.start())
        if start < 0:
            return match.group(0)
        preceding = LIST_OPENING_RE.match(html, start)
        if preceding is None or preceding.group(0) != following:
            return match.group(0)
        return ""

    return LIST_BOUNDARY_RE.sub(merge, html)


def consolidate_blockquotes(html: str) -> str:
    return BLOCKQUOTE_BOUNDARY_RE.sub("\n", html)
