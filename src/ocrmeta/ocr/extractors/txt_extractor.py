"""Plain-text OCR file reader."""

from __future__ import annotations

from pathlib import Path

from ocrmeta.step.errors import TextFileReadError


class TXTExtractor:
    """Read OCR text files as UTF-8, byte for byte."""

    encoding = "utf-8"

    def extract(self, path: Path) -> str:
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise TextFileReadError(f"Failed to read OCR text file: {exc}", path) from exc

        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise TextFileReadError(f"OCR text file is not valid {self.encoding}: {exc}", path) from exc
