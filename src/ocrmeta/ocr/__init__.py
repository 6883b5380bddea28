"""OCR source resolution and text aggregation."""

from .aggregator import aggregate_text, list_ocr_files
from .models import AggregatedText, AltoDocument, AltoPage, OcrRepresentation, OcrSource
from .resolver import resolve_ocr_source

__all__ = [
    "AggregatedText",
    "AltoDocument",
    "AltoPage",
    "OcrRepresentation",
    "OcrSource",
    "aggregate_text",
    "list_ocr_files",
    "resolve_ocr_source",
]
