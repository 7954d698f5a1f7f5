from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from functools import cmp_to_key
from typing import Iterable, List, Pattern, Sequence

from ..ingestion.structure import Line, TextFragment
from .cleaning import DEFAULT_NOISE_PATTERNS


@dataclass
class LayoutConfig:
    """Tunable thresholds for rebuilding reading order from positioned text."""
    # Fragments closer than height*this vertically share a line
    line_tolerance: float = 0.5
    # Line gaps wider than height*this start a new paragraph
    paragraph_gap: float = 1.8
    # Used when the backend reports a zero glyph height
    default_height: float = 12.0
    # Decimal places kept on fragment coordinates
    coordinate_precision: int = 1
    noise_patterns: List[Pattern[str]] = field(default_factory=lambda: list(DEFAULT_NOISE_PATTERNS))

    def with_extra_noise(self, patterns: Iterable[str | Pattern[str]]) -> "LayoutConfig":
        extra = [re.compile(p) if isinstance(p, str) else p for p in patterns]
        return replace(self, noise_patterns=[*self.noise_patterns, *extra])


def _reading_order(a: TextFragment, b: TextFragment, tolerance: float) -> int:
    # Not transitive for mixed heights; callers rely on sort stability instead
    dy = a.y - b.y
    if abs(dy) < a.height * tolerance:
        return (a.x > b.x) - (a.x < b.x)
    return (dy > 0) - (dy < 0)


def sort_fragments(fragments: Sequence[TextFragment], tolerance: float = 0.5) -> List[TextFragment]:
    """Top-to-bottom, then left-to-right within a row."""
    return sorted(fragments, key=cmp_to_key(lambda a, b: _reading_order(a, b, tolerance)))


def assemble_lines(fragments: Sequence[TextFragment], config: LayoutConfig | None = None) -> List[Line]:
    config = config or LayoutConfig()
    ordered = sort_fragments(fragments, config.line_tolerance)
    if not ordered:
        return []

    lines: List[Line] = []
    current = Line([ordered[0]])
    for frag in ordered[1:]:
        prev = current.fragments[-1]
        if abs(frag.y - prev.y) <= frag.height * config.line_tolerance:
            current.fragments.append(frag)
        else:
            lines.append(current)
            current = Line([frag])
    lines.append(current)
    return lines
