"""Shared contract for per-representation OCR text extractors."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextExtractor(Protocol):
    """Protocol that every OCR file extractor must implement."""

    def extract(self, path: Path) -> str:
        """Return the full text of one OCR file or raise a per-file error."""
