"""Ordered pattern-to-markup rules.

Each rule is applied to the whole buffer before the next one runs, so the
order of ``BLOCK_RULES`` is load-bearing: longer heading and emphasis markers
come before shorter ones, task items before plain list items, and the
paragraph catch-all last.
"""
from __future__ import annotations

import re
from typing import Iterable, Tuple

from .models import Rule
from .protect import is_block_placeholder


HEADING_RULES: Tuple[Rule, ...] = tuple(
    Rule(
        name=f"heading_{level}",
        pattern=re.compile(rf"^#{{{level}}}[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$", re.MULTILINE),
        replacement=rf"<h{level}>\1</h{level}>",
    )
    for level in range(6, 0, -1)
)

HORIZONTAL_RULE = Rule(
    name="horizontal_rule",
    pattern=re.compile(r"^(?:-{3,}|\*{3,}|_{3,})[ \t]*$", re.MULTILINE),
    replacement="<hr>",
)

# Delimiters may not touch whitespace on their inner side, so "2 * 3 * 4" and
# list bullets stay literal. Underscores additionally never open or close
# inside a word (snake_case).
BOLD_ITALIC_STAR_RE = re.compile(r"\*\*\*(?!\s)(.+?)(?<!\s)\*\*\*")
BOLD_ITALIC_UNDERSCORE_RE = re.compile(r"(?<!\w)___(?!\s)(.+?)(?<!\s)___(?!\w)")
BOLD_STAR_RE = re.compile(r"\*\*(?!\s)(.+?)(?<!\s)\*\*")
BOLD_UNDERSCORE_RE = re.compile(r"(?<!\w)__(?!\s)(.+?)(?<!\s)__(?!\w)")
ITALIC_STAR_RE = re.compile(r"\*(?!\s)(.+?)(?<!\s)\*")
ITALIC_UNDERSCORE_RE = re.compile(r"(?<!\w)_(?!\s)(.+?)(?<!\s)_(?!\w)")
STRIKETHROUGH_RE = re.compile(r"~~(?!\s)(.+?)(?<!\s)~~")
LINK_RE = re.compile(r"(?<!!)\[([^\]]+)\]\(([^)]+)\)")
IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")

# Lines opening with one of these tags are never wrapped in a paragraph.
BLOCK_TAG_RE = re.compile(
    r"^</?(?:h[1-6]|hr|blockquote|ul|ol|li|table|thead|tbody|tr|th|td|pre|p|div|section|details|summary)\b",
    re.IGNORECASE,
)

INLINE_RULES: Tuple[Rule, ...] = (
    Rule("bold_italic_star", BOLD_ITALIC_STAR_RE, r"<strong><em>\1</em></strong>"),
    Rule("bold_italic_underscore", BOLD_ITALIC_UNDERSCORE_RE, r"<strong><em>\1</em></strong>"),
    Rule("bold_star", BOLD_STAR_RE, r"<strong>\1</strong>"),
    Rule("bold_underscore", BOLD_UNDERSCORE_RE, r"<strong>\1</strong>"),
    Rule("italic_star", ITALIC_STAR_RE, r"<em>\1</em>"),
    Rule("italic_underscore", ITALIC_UNDERSCORE_RE, r"<em>\1</em>"),
    Rule("strikethrough", STRIKETHROUGH_RE, r"<del>\1</del>"),
    Rule("link", LINK_RE, r'<a href="\2">\1</a>'),
    Rule("image", IMAGE_RE, r'<img src="\2" alt="\1">'),
)


def _render_task_item(match: re.Match[str]) -> str:
    checked = match.group(1).lower() == "x"
    checkbox = '<input type="checkbox" checked disabled>' if checked else '<input type="checkbox" disabled>'
    return f'<ul class="task-list"><li class="task-item">{checkbox} {match.group(2)}</li></ul>'


def _wrap_paragraph(match: re.Match[str]) -> str:
    line = match.group(0)
    stripped = line.strip()
    if not stripped:
        return ""
    if BLOCK_TAG_RE.match(stripped) or is_block_placeholder(stripped):
        return line
    return f"<p>{stripped}</p>"


BLOCKQUOTE = Rule(
    name="blockquote",
    pattern=re.compile(r"^>[ \t]?(.*)$", re.MULTILINE),
    replacement=r"<blockquote>\1</blockquote>",
)
TASK_ITEM = Rule(
    name="task_item",
    pattern=re.compile(r"^[ \t]*[*+-][ \t]+\[([ xX])\][ \t]+(.+)$", re.MULTILINE),
    replacement=_render_task_item,
)
UNORDERED_ITEM = Rule(
    name="unordered_item",
    pattern=re.compile(r"^[ \t]*[*+-][ \t]+(.+)$", re.MULTILINE),
    replacement=r"<ul><li>\1</li></ul>",
)
ORDERED_ITEM = Rule(
    name="ordered_item",
    pattern=re.compile(r"^[ \t]*\d+\.[ \t]+(.+)$", re.MULTILINE),
    replacement=r"<ol><li>\1</li></ol>",
)
PARAGRAPH = Rule(
    name="paragraph",
    pattern=re.compile(r"^.*$", re.MULTILINE),
    replacement=_wrap_paragraph,
)

BLOCK_RULES: Tuple[Rule, ...] = (
    *HEADING_RULES,
    HORIZONTAL_RULE,
    *INLINE_RULES,
    BLOCKQUOTE,
    TASK_ITEM,
    UNORDERED_ITEM,
    ORDERED_ITEM,
    PARAGRAPH,
)


def apply_rules(text: str, rules: Iterable[Rule]) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


def apply_inline(text: str) -> str:
    return apply_rules(text, INLINE_RULES)
