from __future__ import annotations

from typing import List, Sequence

import fitz
import pytest

# (x, y, text) or (x, y, text, fontsize); y is the baseline from the top of the page
Item = tuple


def build_pdf(pages: Sequence[Sequence[Item]]) -> bytes:
    doc = fitz.open()
    for items in pages:
        page = doc.new_page()
        for x, y, text, *size in items:
            page.insert_text((x, y), text, fontsize=size[0] if size else 12)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def two_page_pdf() -> bytes:
    pages: List[List[Item]] = [
        [(72, 100, "Hello"), (110, 100, "world")],
        [(72, 100, "Goodbye")],
    ]
    return build_pdf(pages)
