from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..ingestion.structure import Line, PageText
from .cleaning import is_noise
from .layout import LayoutConfig

PAGE_SEPARATOR = "\n\n"


def reconstruct_page(lines: Iterable[Line], config: LayoutConfig | None = None) -> str:
    """Join a page's lines, dropping running headers/footers and marking paragraph gaps.

    A blank line is emitted before any line whose distance to the previously
    emitted line exceeds ``paragraph_gap`` times its height. Filtered lines do
    not move the gap reference.
    """
    config = config or LayoutConfig()
    out: List[str] = []
    prev_y: Optional[float] = None
    for line in lines:
        text = line.text
        if is_noise(text, config.noise_patterns):
            logging.debug("Dropping header/footer line: %r", text)
            continue
        if prev_y is not None and abs(line.y - prev_y) > line.height * config.paragraph_gap:
            out.append("")
        out.append(text)
        prev_y = line.y
    return "\n".join(out)


def join_pages(pages: Iterable[PageText]) -> str:
    # Pages are always a paragraph boundary; empty pages leave no trace
    return PAGE_SEPARATOR.join(p.text for p in pages if p.text.strip()).strip()
