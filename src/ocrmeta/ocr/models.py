"""Data structures shared by the OCR resolver, extractors and aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OcrRepresentation(Enum):
    PLAIN_TEXT = "txt"
    ALTO = "alto"


@dataclass(frozen=True, slots=True)
class OcrSource:
    """The OCR directory chosen for a run and how its files are read."""

    representation: OcrRepresentation
    directory: Path


@dataclass(slots=True)
class AltoPage:
    """Text pulled from one ``Page`` element of an ALTO document."""

    page_id: str | None
    text: str = ""


@dataclass(slots=True)
class AltoDocument:
    """Parsed ALTO file as an ordered sequence of pages."""

    source_path: str
    pages: list[AltoPage] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(page.text for page in self.pages)


@dataclass(slots=True)
class AggregatedText:
    """Non-empty text concatenated from every file of an OCR directory."""

    text: str
    representation: OcrRepresentation
    files_read: list[Path] = field(default_factory=list)
    files_failed: list[Path] = field(default_factory=list)
