"""Orchestrates OCR resolution, aggregation and metadata reconciliation."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol

from ocrmeta.metadata.models import MetadataRecord
from ocrmeta.metadata.reconciler import AddableFieldProvider, apply_field, check_field
from ocrmeta.ocr.aggregator import aggregate_text
from ocrmeta.ocr.resolver import resolve_ocr_source
from ocrmeta.step.config import StepSettings
from ocrmeta.step.errors import NoTextExtractedError, StepError
from ocrmeta.step.journal import JournalLevel, JournalSink, LoggingJournal
from ocrmeta.step.work_item import WorkItem

logger = logging.getLogger(__name__)

STATUS_FINISH = "finish"
STATUS_ERROR = "error"


class RecordStore(Protocol):
    def read_record(self, item: WorkItem) -> MetadataRecord:
        """Load the item's record or raise ``RecordReadError``."""

    def write_record(self, item: WorkItem, record: MetadataRecord) -> None:
        """Persist the item's record or raise ``RecordWriteError``."""


@dataclass(frozen=True, slots=True)
class StepResult:
    """Terminal outcome of one run, reported back to the host."""

    process_id: int
    status: str
    reason: str
    metadata_field: str
    error_code: str | None = None
    representation: str | None = None
    action: str | None = None
    files_read: int = 0
    files_failed: int = 0

    @property
    def success(self) -> bool:
        return self.status != STATUS_ERROR

    def to_dict(self) -> dict[str, object]:
        return {
            "process_id": self.process_id,
            "status": self.status,
            "reason": self.reason,
            "error_code": self.error_code,
            "metadata_field": self.metadata_field,
            "representation": self.representation,
            "action": self.action,
            "files_read": self.files_read,
            "files_failed": self.files_failed,
        }


class OcrToMetadataStep:
    """Write the OCR text of a work item into the configured metadata field."""

    def __init__(
        self,
        settings: StepSettings,
        store: RecordStore,
        ruleset: AddableFieldProvider,
        journal: JournalSink | None = None,
    ) -> None:
        self._settings = settings
        self._store = store
        self._ruleset = ruleset
        self._journal = journal or LoggingJournal()

    @property
    def metadata_field(self) -> str:
        return self._settings.metadata_field

    def execute(self, item: WorkItem) -> bool:
        return self.run(item).success

    def run(self, item: WorkItem) -> StepResult:
        """Run every stage in order and stop at the first failure."""

        field_name = self._settings.metadata_field
        representation: str | None = None
        try:
            source = resolve_ocr_source(item.ocr_txt_directory, item.ocr_alto_directory)
            representation = source.representation.value

            record = self._store.read_record(item)
            check = check_field(record.logical, field_name, self._ruleset)

            aggregated = aggregate_text(source, self._journal, strict=self._settings.strict_files)
            if aggregated is None:
                raise NoTextExtractedError("No text could be extracted from the OCR files", source.directory)

            apply_field(record.logical, check, aggregated.text)
            self._store.write_record(item, record)
        except StepError as exc:
            self._journal.record(JournalLevel.ERROR, str(exc))
            return StepResult(
                process_id=item.process_id,
                status=STATUS_ERROR,
                reason=str(exc),
                metadata_field=field_name,
                error_code=exc.code,
                representation=representation,
            )

        verb = "replaced" if check.existing is not None else "added"
        reason = f"{verb} metadata {field_name} from {len(aggregated.files_read)} {representation} file(s)"
        self._journal.record(JournalLevel.INFO, reason)
        logger.info("OcrToMetadata step executed for process %s", item.process_id)
        return StepResult(
            process_id=item.process_id,
            status=STATUS_FINISH,
            reason=reason,
            metadata_field=field_name,
            representation=representation,
            action=check.action,
            files_read=len(aggregated.files_read),
            files_failed=len(aggregated.files_failed),
        )
