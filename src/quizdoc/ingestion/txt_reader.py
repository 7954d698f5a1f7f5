from __future__ import annotations

from typing import List

from ..text.layout import LayoutConfig
from ..text.paragraphs import join_pages
from .structure import PageText


def read_txt(data: bytes, config: LayoutConfig | None = None) -> str:
    """Decode a plain text upload.

    Assumptions:
    - Pages are separated by form-feed (\f) if produced via pdftotext;
      each page break becomes a blank line, as for PDFs.
    - Otherwise, the whole file is a single page and is kept as-is.
    """
    text = data.decode("utf-8", errors="ignore")
    if "\f" not in text:
        return text.strip()
    pages: List[PageText] = [
        PageText(number=idx, text=raw.strip("\r\n"))
        for idx, raw in enumerate(text.split("\f"), start=1)
    ]
    return join_pages(pages)
