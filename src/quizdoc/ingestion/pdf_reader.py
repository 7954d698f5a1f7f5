from __future__ import annotations

import logging
from typing import Iterator, List, Optional

import fitz  # pymupdf

from ..errors import DocumentOpenError, DocumentParseError, EmptyExtractionError
from ..text.layout import LayoutConfig, assemble_lines
from ..text.paragraphs import join_pages, reconstruct_page
from .structure import PageText, TextFragment


def _iter_spans(page: fitz.Page) -> Iterator[dict]:
    # dict output: blocks -> lines -> spans; block type 1 is an image
    data = page.get_text("dict")
    for block in data.get("blocks", []):
        if block.get("type", 0) != 0:
            continue
        for line in block.get("lines", []):
            yield from line.get("spans", [])


def _to_fragment(span: dict, config: LayoutConfig) -> Optional[TextFragment]:
    try:
        text = span["text"].strip()
        if not text:
            return None
        # Span origin is the text matrix translation, already in unrotated page space at zoom 1
        x, y = span["origin"]
        height = abs(float(span.get("size") or 0)) or config.default_height
        precision = config.coordinate_precision
        return TextFragment(text=text, x=round(float(x), precision), y=round(float(y), precision), height=height)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logging.debug("Skipping malformed text span %r: %s", span, e)
        return None


def collect_fragments(page: fitz.Page, config: LayoutConfig | None = None) -> List[TextFragment]:
    """Positioned, non-blank text runs of one page, in whatever order the backend yields them."""
    config = config or LayoutConfig()
    fragments: List[TextFragment] = []
    for span in _iter_spans(page):
        frag = _to_fragment(span, config)
        if frag is not None:
            fragments.append(frag)
    return fragments


def _open_pdf(data: bytes) -> fitz.Document:
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise DocumentOpenError(f"Could not open PDF: {e}", cause=e) from e
    if doc.needs_pass:
        doc.close()
        raise DocumentOpenError("PDF is encrypted and needs a password")
    return doc


def _page_fragments(doc: fitz.Document, index: int, config: LayoutConfig) -> List[TextFragment]:
    # The page is dropped when this returns; PyMuPDF has no explicit page close
    page = doc.load_page(index)
    return collect_fragments(page, config)


def read_pdf_pages(data: bytes, config: LayoutConfig | None = None) -> List[PageText]:
    config = config or LayoutConfig()
    pages: List[PageText] = []
    with _open_pdf(data) as doc:
        logging.debug("PDF opened: %d pages", doc.page_count)
        for index in range(doc.page_count):
            try:
                fragments = _page_fragments(doc, index, config)
            except RuntimeError as e:
                raise DocumentParseError(f"Could not read page {index + 1}: {e}", cause=e) from e
            if not fragments:
                logging.debug("Page %d has no text layer, skipping", index + 1)
                continue
            lines = assemble_lines(fragments, config)
            pages.append(PageText(number=index + 1, text=reconstruct_page(lines, config)))
    return pages


def extract_pdf_text(data: bytes, config: LayoutConfig | None = None) -> str:
    """Reading-order text of a PDF buffer, pages separated by a blank line.

    Raises DocumentOpenError when the buffer cannot be parsed and
    EmptyExtractionError when it parses but carries no text layer.
    """
    pages = read_pdf_pages(data, config)
    text = join_pages(pages)
    if not text:
        raise EmptyExtractionError()
    logging.info("Extracted %d characters from %d text pages", len(text), len(pages))
    return text
