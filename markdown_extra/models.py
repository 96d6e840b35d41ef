"""Parsed block structures produced by the recognizers before rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Alignment(str, Enum):
    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def style_attr(self) -> str:
        """Attribute fragment for a ``th``/``td`` start tag (empty for NONE)."""
        if self is Alignment.NONE:
            return ""
        return f' style="text-align:{self.value};"'


@dataclass
class TableSpec:
    headers: List[str]
    alignments: List[Alignment]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def alignment_for(self, column: int) -> Alignment:
        if column < len(self.alignments):
            return self.alignments[column]
        return Alignment.NONE


@dataclass
class CodeBlock:
    body: str
    language: Optional[str] = None


@dataclass
class Definition:
    body: str
    loose: bool = False


@dataclass
class DefinitionGroup:
    """Terms followed by the definitions that belong to them."""

    terms: List[str] = field(default_factory=list)
    definitions: List[Definition] = field(default_factory=list)
