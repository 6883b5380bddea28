"""Concatenate the text of every file in the resolved OCR directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ocrmeta.ocr.extractors import TextExtractor, build_extractor
from ocrmeta.ocr.models import AggregatedText, OcrSource
from ocrmeta.step.errors import AltoParseError, NoTextExtractedError, TextFileReadError
from ocrmeta.step.journal import JournalLevel, JournalSink, LoggingJournal

logger = logging.getLogger(__name__)


def list_ocr_files(directory: Path) -> list[Path]:
    """Return regular, non-hidden files of *directory* sorted by name."""

    return sorted(
        (path for path in directory.iterdir() if path.is_file() and not path.name.startswith(".")),
        key=lambda path: path.name,
    )


def aggregate_text(
    source: OcrSource,
    journal: JournalSink | None = None,
    *,
    strict: bool = False,
    extractor: TextExtractor | None = None,
) -> AggregatedText | None:
    """Read every OCR file of *source* and join the results without separators.

    A file that cannot be read contributes nothing and is reported to the
    journal; with ``strict`` the per-file error is raised instead. Returns
    ``None`` when the joined text is empty and raises ``NoTextExtractedError``
    when the directory itself cannot be listed.
    """

    sink = journal or LoggingJournal()
    reader = extractor or build_extractor(source.representation)
    parts: list[str] = []
    files_read: list[Path] = []
    files_failed: list[Path] = []

    try:
        paths = list_ocr_files(source.directory)
    except OSError as exc:
        raise NoTextExtractedError(f"Failed to list OCR directory: {exc}", source.directory) from exc

    for path in paths:
        logger.debug("Reading OCR file %s", path)
        try:
            content = reader.extract(path)
        except (AltoParseError, TextFileReadError) as exc:
            if strict:
                raise
            sink.record(JournalLevel.ERROR, f"failed to read the content from the OCR file: {exc}")
            files_failed.append(path)
            continue
        parts.append(content)
        files_read.append(path)

    text = "".join(parts)
    if not text:
        return None

    return AggregatedText(
        text=text,
        representation=source.representation,
        files_read=files_read,
        files_failed=files_failed,
    )
