"""Placeholder protection for literal content.

Fenced blocks, inline code spans and link or image destinations are swapped
out for NUL-delimited tokens before any rule runs and swapped back, escaped,
once every rule has run. NUL never survives into the rule buffer otherwise,
so no pattern can match inside a token and user text can never forge one.
"""
from __future__ import annotations

import re
from typing import List, Tuple

from .escaping import escape_html
from .models import ProtectedSpan, SpanKind


FENCED_CODE_RE = re.compile(r"```(?:([\w+#.-]+)?[ \t]*\n)?(.*?)```", re.DOTALL)
INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
# The destination part of "[text](target)" and "![alt](target)".
TARGET_RE = re.compile(r"(?<=\]\()([^)\n\u0000]+)(?=\))")

FENCE_TOKEN = "\u0000FENCE{index}\u0000"
CODE_TOKEN = "\u0000CODE{index}\u0000"
TARGET_TOKEN = "\u0000TARGET{index}\u0000"
TABLE_TOKEN = "\u0000TABLE{index}\u0000"
PLACEHOLDER_RE = re.compile(r"\u0000(?:FENCE|CODE|TARGET)(\d+)\u0000")
BLOCK_PLACEHOLDER_LINE_RE = re.compile(r"^\s*\u0000(?:FENCE|TABLE)\d+\u0000\s*$")


def protect(text: str) -> Tuple[str, List[ProtectedSpan]]:
    spans: List[ProtectedSpan] = []

    def stash_fence(match: re.Match[str]) -> str:
        spans.append(ProtectedSpan(kind=SpanKind.FENCED, body=match.group(2), language=match.group(1)))
        return FENCE_TOKEN.format(index=len(spans) - 1)

    def stash_inline(match: re.Match[str]) -> str:
        spans.append(ProtectedSpan(kind=SpanKind.INLINE, body=match.group(1)))
        return CODE_TOKEN.format(index=len(spans) - 1)

    def stash_target(match: re.Match[str]) -> str:
        spans.append(ProtectedSpan(kind=SpanKind.TARGET, body=match.group(1)))
        return TARGET_TOKEN.format(index=len(spans) - 1)

    text = text.replace("\u0000", "")
    # Fences first so their backticks never pair up as inline spans.
    text = FENCED_CODE_RE.sub(stash_fence, text)
    text = INLINE_CODE_RE.sub(stash_inline, text)
    # Targets last; emphasis markers inside URLs must reach the link rules intact.
    text = TARGET_RE.sub(stash_target, text)
    return text, spans


def restore(html: str, spans: List[ProtectedSpan]) -> str:
    return PLACEHOLDER_RE.sub(lambda match: render_span(spans[int(match.group(1))]), html)


def render_span(span: ProtectedSpan) -> str:
    if span.kind is SpanKind.FENCED:
        language = span.language or "plaintext"
        body = escape_html(span.body.strip("\r\n"))
        return f'<pre><code class="language-{language}">{body}</code></pre>'
    if span.kind is SpanKind.TARGET:
        return escape_html(span.body)
    return f"<code>{escape_html(span.body)}</code>"


def is_block_placeholder(line: str) -> bool:
    return BLOCK_PLACEHOLDER_LINE_RE.match(line) is not None
