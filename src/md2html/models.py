from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Union


class SpanKind(Enum):
    FENCED = "fenced"
    INLINE = "inline"
    TARGET = "target"


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


Replacement = Union[str, Callable[[re.Match], str]]


@dataclass(frozen=True)
class Rule:
    """A pattern paired with the markup it produces.

    ``replacement`` is either a back-reference template (``r"<em>\\1</em>"``)
    or a callable receiving the match. Every match in the buffer is replaced
    in one call to :meth:`apply`.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass
class ProtectedSpan:
    kind: SpanKind
    body: str
    language: Optional[str] = None


@dataclass
class Table:
    headers: List[str]
    alignments: List[Alignment]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def alignment_for(self, column: int) -> Alignment:
        if column < len(self.alignments):
            return self.alignments[column]
        return Alignment.LEFT


@dataclass
class FrontMatter:
    title: str = "Markdown Document"
    lang: str = "en"
    include_style: bool = True
    max_width: int = 800


@dataclass
class DocumentStats:
    words: int
    characters: int
