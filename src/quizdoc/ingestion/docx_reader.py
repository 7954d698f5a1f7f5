from __future__ import annotations

import io
import logging
import zipfile
from typing import Iterator

import docx
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table

from ..errors import DocumentOpenError
from ..text.layout import LayoutConfig


def _table_blocks(table: Table) -> Iterator[str]:
    seen = []
    for row in table.rows:
        for cell in row.cells:
            # merged cells repeat the same underlying element across the row
            if any(cell._tc is tc for tc in seen):
                continue
            seen.append(cell._tc)
            yield cell.text


def _body_blocks(document) -> Iterator[str]:
    # Paragraphs and tables in document order
    for item in document.iter_inner_content():
        if isinstance(item, Table):
            yield from _table_blocks(item)
        else:
            yield item.text


def read_docx(data: bytes, config: LayoutConfig | None = None) -> str:
    """Raw text of a Word document, one blank line between body paragraphs and table cells."""
    try:
        document = docx.Document(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        raise DocumentOpenError(f"Could not open Word document: {e}", cause=e) from e
    blocks = [b.strip() for b in _body_blocks(document) if b.strip()]
    logging.debug("Word document has %d text blocks", len(blocks))
    return "\n\n".join(blocks)
