"""Directory layout of one digitization process."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

METADATA_FILE_NAME = "meta.json"
JOURNAL_FILE_NAME = "journal.jsonl"
OCR_DIR_NAME = "ocr"


@dataclass(frozen=True, slots=True)
class WorkItem:
    """A process directory with its OCR subfolders and metadata record."""

    process_id: int
    title: str
    process_dir: Path

    @property
    def ocr_directory(self) -> Path:
        return self.process_dir / OCR_DIR_NAME

    @property
    def ocr_txt_directory(self) -> Path:
        return self.ocr_directory / f"{self.title}_txt"

    @property
    def ocr_alto_directory(self) -> Path:
        return self.ocr_directory / f"{self.title}_alto"

    @property
    def metadata_file(self) -> Path:
        return self.process_dir / METADATA_FILE_NAME

    @property
    def journal_file(self) -> Path:
        return self.process_dir / JOURNAL_FILE_NAME
