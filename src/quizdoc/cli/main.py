from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Set

from tqdm import tqdm

from ..errors import (
    DocumentParseError,
    EmptyExtractionError,
    FileTooLargeError,
    UnsupportedFormatError,
)
from ..ingestion.dispatch import parse_document
from ..ingestion.structure import ParsedDocument
from ..text.layout import LayoutConfig
from ..utils.io import MAX_UPLOAD_BYTES, derive_output_target
from ..utils.logging import configure_logging
from ..utils.timers import time_block


def build_config(args: argparse.Namespace) -> LayoutConfig:
    config = LayoutConfig(
        line_tolerance=args.line_tolerance,
        paragraph_gap=args.paragraph_gap,
        default_height=args.default_height,
    )
    if args.noise_pattern:
        config = config.with_extra_noise(args.noise_pattern)
    return config


def user_message(error: Exception) -> str:
    if isinstance(error, EmptyExtractionError):
        return "Could not extract text from the uploaded file. The file may be empty or image-based."
    if isinstance(error, (DocumentParseError, OSError)):
        return f"Could not read this file: {error}"
    return str(error)


def emit(document: ParsedDocument, out_dir: Path | None, written: Set[Path] | None = None) -> None:
    if out_dir is None:
        sys.stdout.write(document.text + "\n")
        return
    name = Path(document.filename or "pasted")
    target = derive_output_target(name, out_dir)
    if written is not None:
        if target.txt_path in written:
            # same stem already written this run, e.g. notes.pdf then notes.docx
            logging.warning("%s would overwrite %s, writing %s.txt instead", name, target.txt_path, name.name)
            target.base_name = name.name
        written.add(target.txt_path)
    target.txt_path.write_text(document.text + "\n", encoding="utf-8")
    logging.info("Wrote text: %s", target.txt_path)


def run(inputs: List[Path], text: str | None, out_dir: Path | None, config: LayoutConfig, max_bytes: int, verbose: bool) -> int:
    configure_logging(verbose=verbose)

    if text and text.strip():
        emit(parse_document(text=text, config=config), out_dir)
        return 0
    if not inputs:
        logging.error("No file given and no text provided")
        return 2

    failures = 0
    written: Set[Path] = set()
    for path in tqdm(inputs, desc="Documents", disable=len(inputs) < 2):
        try:
            with time_block(f"Extracting {path.name}"):
                document = parse_document(path, config=config, max_bytes=max_bytes)
        except (DocumentParseError, EmptyExtractionError, UnsupportedFormatError, FileTooLargeError, OSError) as e:
            logging.debug("Extraction failed for %s", path, exc_info=True)
            logging.error("%s: %s", path, user_message(e))
            failures += 1
            continue
        emit(document, out_dir, written)
    return 1 if failures else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Extract quiz-ready text from PDF, Word and plain text documents")
    parser.add_argument("inputs", type=Path, nargs="*")
    parser.add_argument("--text", default=None, help="Use pasted text instead of reading files")
    parser.add_argument("--out-dir", type=Path, default=None, help="Write <name>.txt files here instead of printing")
    parser.add_argument("--line-tolerance", type=float, default=0.5, help="Same-line tolerance as a fraction of glyph height")
    parser.add_argument("--paragraph-gap", type=float, default=1.8, help="Line gap, in glyph heights, that starts a new paragraph")
    parser.add_argument("--default-height", type=float, default=12.0, help="Glyph height used when the PDF reports none")
    parser.add_argument("--noise-pattern", action="append", default=[], help="Extra regex for header/footer lines to drop (matched lower-cased)")
    parser.add_argument("--max-bytes", type=int, default=MAX_UPLOAD_BYTES)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    code = run(
        inputs=args.inputs,
        text=args.text,
        out_dir=args.out_dir,
        config=build_config(args),
        max_bytes=args.max_bytes,
        verbose=args.verbose,
    )
    sys.exit(code)


if __name__ == "__main__":
    main()
