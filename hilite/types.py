from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NewType

# ---- Aliases for clarity ----
ProfileKey = NewType("ProfileKey", str)  # "java-like" | "c-like" | ...
ThemeName = NewType("ThemeName", str)  # "vscode-dark" | "semantic" | ...


class Category(str, Enum):
    """Syntactic category of a highlighted span."""
    ANNOTATION = "annotation"
    FUNCTION = "function"
    KEYWORD = "keyword"
    BUILTIN = "builtin"
    TYPE = "type"
    NUMBER = "number"
    STRING = "string"
    COMMENT = "comment"


class LiteralKind(str, Enum):
    STRING = "string"
    COMMENT = "comment"

    @property
    def category(self) -> Category:
        return Category(self.value)


# ---- Literal regions ----

@dataclass(frozen=True)
class LiteralRegion:
    """
    A string or comment literal cut out of the escaped text.

    Indices follow discovery order (left to right).
    raw_text is the escaped text exactly as matched, delimiters included.
    """
    index: int
    raw_text: str
    kind: LiteralKind


# ---- Classified spans ----

@dataclass(frozen=True)
class Span:
    """Half-open interval [start, end) of the shielded text with its category."""
    start: int
    end: int
    category: Category

    def overlaps(self, start: int, end: int) -> bool:
        return self.start < end and start < self.end
