from __future__ import annotations

import re
from typing import Dict


ESCAPE_MAP: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
ESCAPE_RE = re.compile(r"[&<>\"']")


def escape_html(text: str) -> str:
    """Replace the five HTML-special characters with entities.

    Not idempotent: ``escape_html(escape_html("&"))`` yields ``&amp;amp;``.
    Call it exactly once per literal and never on generated markup.
    """
    return ESCAPE_RE.sub(lambda match: ESCAPE_MAP[match.group(0)], text)
