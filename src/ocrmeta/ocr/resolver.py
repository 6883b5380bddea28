"""Pick the authoritative OCR directory of a work item."""

from __future__ import annotations

import logging
from pathlib import Path

from ocrmeta.ocr.models import OcrRepresentation, OcrSource
from ocrmeta.step.errors import NoOcrSourceError

logger = logging.getLogger(__name__)


def directory_exists(path: Path) -> bool:
    """Return True when *path* exists and is a directory, not a file."""

    return path.exists() and path.is_dir()


def resolve_ocr_source(text_dir: str | Path, alto_dir: str | Path) -> OcrSource:
    """Select plain text when available, otherwise ALTO.

    Plain text always wins when both directories are present.
    """

    text_path = Path(text_dir)
    if directory_exists(text_path):
        logger.debug("Using OCR text directory %s", text_path)
        return OcrSource(OcrRepresentation.PLAIN_TEXT, text_path)

    alto_path = Path(alto_dir)
    if directory_exists(alto_path):
        logger.debug("Using OCR ALTO directory %s", alto_path)
        return OcrSource(OcrRepresentation.ALTO, alto_path)

    raise NoOcrSourceError("No OCR text or ALTO directory available", text_path.parent)
