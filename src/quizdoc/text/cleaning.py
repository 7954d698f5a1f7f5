from __future__ import annotations

import re
from typing import Iterable, Pattern

# Running headers/footers seen on course handouts: "Session 2024 ...", "Page: 3/10"
SESSION_YEAR_RE = re.compile(r"^\s*session\s+\d{4}")
PAGE_OF_RE = re.compile(r"^page\s*:\s*\d+\s*/\s*\d+")

DEFAULT_NOISE_PATTERNS: tuple[Pattern[str], ...] = (SESSION_YEAR_RE, PAGE_OF_RE)


def is_noise(line_text: str, patterns: Iterable[Pattern[str]]) -> bool:
    low = line_text.strip().lower()
    return any(p.search(low) for p in patterns)
