from __future__ import annotations

from typing import Optional


class IngestionError(Exception):
    """Base class for everything that can go wrong turning a file into text."""


class DocumentParseError(IngestionError):
    """The file could not be read at all."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class DocumentOpenError(DocumentParseError):
    """The backend rejected the buffer (corrupt, encrypted, not a PDF/DOCX)."""


class EmptyExtractionError(IngestionError):
    """The file is valid but holds no extractable text (e.g. a scanned PDF)."""

    def __init__(self, filename: Optional[str] = None) -> None:
        where = f" in {filename}" if filename else ""
        super().__init__(f"No extractable text found{where}")
        self.filename = filename


class UnsupportedFormatError(IngestionError):
    def __init__(self, extension: str) -> None:
        super().__init__(f"Unsupported file format: {extension or '(none)'}")
        self.extension = extension


class FileTooLargeError(IngestionError):
    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"File is {size} bytes, limit is {limit} bytes")
        self.size = size
        self.limit = limit
