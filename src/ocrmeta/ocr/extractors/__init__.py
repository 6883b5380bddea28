"""OCR file extractors keyed by representation."""

from __future__ import annotations

from ocrmeta.ocr.models import OcrRepresentation

from .alto_extractor import AltoExtractor, parse_alto
from .base import TextExtractor
from .txt_extractor import TXTExtractor


def build_extractor(representation: OcrRepresentation) -> TextExtractor:
    """Return the extractor used for every file of the given representation."""

    if representation is OcrRepresentation.PLAIN_TEXT:
        return TXTExtractor()
    if representation is OcrRepresentation.ALTO:
        return AltoExtractor()
    raise ValueError(f"Unsupported OCR representation: {representation!r}")


__all__ = [
    "AltoExtractor",
    "TXTExtractor",
    "TextExtractor",
    "build_extractor",
    "parse_alto",
]
