from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class TextFragment:
    text: str
    x: float        # viewport x of the glyph origin
    y: float        # viewport y of the glyph origin (0 top)
    height: float   # glyph height, also the line-grouping unit


@dataclass
class Line:
    fragments: List[TextFragment] = field(default_factory=list)

    @property
    def y(self) -> float:
        return self.fragments[0].y

    @property
    def height(self) -> float:
        return self.fragments[0].height

    @property
    def text(self) -> str:
        return " ".join(f.text for f in self.fragments)


@dataclass
class PageText:
    number: int
    text: str


@dataclass
class ParsedDocument:
    text: str
    source: str                     # "file" or "pasted"
    filename: Optional[str] = None
