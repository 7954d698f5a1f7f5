from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional

from ..errors import EmptyExtractionError, UnsupportedFormatError
from ..text.layout import LayoutConfig
from ..utils.io import MAX_UPLOAD_BYTES, read_input
from .docx_reader import read_docx
from .pdf_reader import extract_pdf_text
from .structure import ParsedDocument
from .txt_reader import read_txt

Reader = Callable[[bytes, Optional[LayoutConfig]], str]

READERS: Dict[str, Reader] = {
    ".txt": read_txt,
    ".pdf": extract_pdf_text,
    ".docx": read_docx,
}


def reader_for(filename: str) -> Reader:
    ext = Path(filename).suffix.lower()
    try:
        return READERS[ext]
    except KeyError:
        raise UnsupportedFormatError(ext) from None


def parse_document(
    path: Path | None = None,
    *,
    text: str | None = None,
    filename: str | None = None,
    config: LayoutConfig | None = None,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> ParsedDocument:
    """Turn pasted text or an uploaded file into quiz-ready text.

    Pasted text takes precedence over a file. The reader is chosen from the
    extension of ``filename`` (the name the user uploaded) or, failing that,
    of ``path``.
    """
    if text is not None and text.strip():
        return ParsedDocument(text=text, source="pasted")
    if path is None:
        raise ValueError("No file given and no text provided")

    name = filename or Path(path).name
    reader = reader_for(name)
    logging.info("Reading %s with %s", name, reader.__name__)
    data = read_input(Path(path), max_bytes)
    try:
        extracted = reader(data, config)
    except EmptyExtractionError:
        raise EmptyExtractionError(name) from None
    if not extracted or not extracted.strip():
        raise EmptyExtractionError(name)
    return ParsedDocument(text=extracted.strip(), source="file", filename=name)
