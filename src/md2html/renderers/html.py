from __future__ import annotations

import logging
import re
from functools import partial
from typing import Any, Iterable, Optional

from ..consolidate import consolidate_blockquotes, consolidate_lists
from ..errors import DuplicateRendererError
from ..models import FrontMatter, Rule
from ..plugins import register_renderer
from ..protect import protect, restore
from ..rules import BLOCK_RULES, INLINE_RULES, apply_rules
from ..tables import restore_tables, transform_tables


NEWLINE_RE = re.compile(r"\r\n?")

logger = logging.getLogger(__name__)


class HtmlRenderer:
    """Render a Markdown document into an HTML fragment.

    The renderer keeps no per-document state; one instance can serve any
    number of callers.
    """

    def __init__(
        self,
        *,
        block_rules: Iterable[Rule] = BLOCK_RULES,
        inline_rules: Iterable[Rule] = INLINE_RULES,
    ) -> None:
        self.block_rules = tuple(block_rules)
        self.inline_rules = tuple(inline_rules)

    def render(self, text: Optional[str]) -> str:
        if not text:
            return ""
        source = NEWLINE_RE.sub("\n", text)
        protected, spans = protect(source)
        html, tables = transform_tables(protected, inline=partial(apply_rules, rules=self.inline_rules))
        html = apply_rules(html, self.block_rules)
        html = restore_tables(html, tables)
        html = restore(html, spans)
        html = consolidate_lists(html)
        html = consolidate_blockquotes(html)
        logger.debug("Rendered fragment with %d code spans and %d tables", len(spans), len(tables))
        return html.strip()


_default_renderer = HtmlRenderer()


def render(text: Optional[str]) -> str:
    return _default_renderer.render(text)


def _html_renderer_factory(*, frontmatter: FrontMatter, **_: Any) -> HtmlRenderer:
    return HtmlRenderer()


try:
    register_renderer("html", _html_renderer_factory)
except DuplicateRendererError:
    pass
