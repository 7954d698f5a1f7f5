from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import FileTooLargeError

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
OUTPUT_DIR = Path("output") / "text"


def read_input(path: Path, max_bytes: int = MAX_UPLOAD_BYTES) -> bytes:
    path = Path(path)
    size = path.stat().st_size
    if max_bytes and size > max_bytes:
        raise FileTooLargeError(size, max_bytes)
    return path.read_bytes()


@dataclass
class OutputTarget:
    directory: Path
    base_name: str

    @property
    def txt_path(self) -> Path:
        return self.directory / f"{self.base_name}.txt"


def derive_output_target(input_path: Path, out_dir: Path | None = None) -> OutputTarget:
    directory = out_dir if out_dir is not None else OUTPUT_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return OutputTarget(directory=directory, base_name=Path(input_path).stem)
