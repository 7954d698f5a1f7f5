from __future__ import annotations

import fitz
import pytest

from quizdoc.errors import DocumentOpenError, DocumentParseError, EmptyExtractionError
from quizdoc.ingestion.pdf_reader import _to_fragment, collect_fragments, extract_pdf_text, read_pdf_pages
from quizdoc.text.layout import LayoutConfig


def test_two_pages_are_joined_with_a_blank_line(two_page_pdf):
    assert extract_pdf_text(two_page_pdf) == "Hello world\n\nGoodbye"


def test_extraction_is_deterministic(two_page_pdf):
    assert extract_pdf_text(two_page_pdf) == extract_pdf_text(two_page_pdf)


def test_blank_pages_leave_no_trace(make_pdf):
    data = make_pdf([[(72, 100, "Hello world")], [], [(72, 100, "Goodbye")]])
    pages = read_pdf_pages(data)
    assert [p.number for p in pages] == [1, 3]
    assert extract_pdf_text(data) == "Hello world\n\nGoodbye"


def test_headers_footers_and_paragraphs_on_a_real_page(make_pdf):
    data = make_pdf([[
        (72, 40, "Session 2024 Cohort"),
        (72, 100, "Line one"),
        (72, 114, "Line two"),
        (72, 160, "Line three"),
        (72, 780, "Page: 1/1"),
    ]])
    assert extract_pdf_text(data) == "Line one\nLine two\n\nLine three"


def test_only_blank_pages_raise_empty_extraction(make_pdf):
    with pytest.raises(EmptyExtractionError):
        extract_pdf_text(make_pdf([[], []]))


def test_only_noise_raises_empty_extraction(make_pdf):
    with pytest.raises(EmptyExtractionError):
        extract_pdf_text(make_pdf([[(72, 780, "Page: 1/1")]]))


def test_non_pdf_bytes_raise_open_error():
    with pytest.raises(DocumentOpenError) as info:
        extract_pdf_text(b"this is certainly not a pdf document")
    assert isinstance(info.value, DocumentParseError)


def test_collect_fragments_reads_position_and_height(make_pdf):
    data = make_pdf([[(72, 100, "Hi", 14), (72, 200, "   ")]])
    with fitz.open(stream=data, filetype="pdf") as doc:
        fragments = collect_fragments(doc[0])
    assert len(fragments) == 1
    only = fragments[0]
    assert only.text == "Hi"
    assert (only.x, only.y) == (72.0, 100.0)
    assert only.height == pytest.approx(14.0)


def test_malformed_spans_are_skipped():
    config = LayoutConfig()
    assert _to_fragment({"text": "x"}, config) is None
    assert _to_fragment({"text": "x", "origin": ("a", 1)}, config) is None
    assert _to_fragment({"text": "  ", "origin": (1, 2), "size": 10}, config) is None


def test_missing_height_falls_back_to_default():
    frag = _to_fragment({"text": " x ", "origin": (1.04, 2.06), "size": 0}, LayoutConfig())
    assert frag.text == "x"
    assert (frag.x, frag.y) == (1.0, 2.1)
    assert frag.height == 12.0


ZERO_PAGE_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj<</Type/Catalog/Pages 2 0 R>>endobj\n"
    b"2 0 obj<</Type/Pages/Count 0/Kids[]>>endobj\n"
    b"trailer<</Root 1 0 R>>\n"
    b"%%EOF"
)


def test_pdf_without_pages_is_empty_not_corrupt():
    with pytest.raises(EmptyExtractionError):
        extract_pdf_text(ZERO_PAGE_PDF)
