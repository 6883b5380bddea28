"""JSON-backed load and save of a work item's metadata record."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
import shutil
from typing import TYPE_CHECKING

from ocrmeta.metadata.models import MetadataRecord
from ocrmeta.step.errors import RecordReadError, RecordWriteError

if TYPE_CHECKING:
    from ocrmeta.step.work_item import WorkItem

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


class JsonRecordStore:
    """Read and atomically rewrite ``meta.json`` files."""

    def __init__(self, *, keep_backup: bool = True) -> None:
        self._keep_backup = keep_backup

    def read_record(self, item: WorkItem) -> MetadataRecord:
        path = item.metadata_file
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise RecordReadError(f"Failed to read metadata record: {exc}", path) from exc

        if not isinstance(payload, dict):
            raise RecordReadError("Metadata record is not a JSON object", path)
        try:
            return MetadataRecord.from_dict(payload)
        except ValueError as exc:
            raise RecordReadError(f"Invalid metadata record: {exc}", path) from exc

    def write_record(self, item: WorkItem, record: MetadataRecord) -> None:
        path = item.metadata_file
        temp_path = path.with_name(f"{path.name}.tmp")
        try:
            if self._keep_backup and path.exists():
                shutil.copy2(path, path.with_name(f"{path.name}{BACKUP_SUFFIX}"))
            temp_path.write_text(json.dumps(record.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(temp_path, path)
        except OSError as exc:
            temp_path.unlink(missing_ok=True)
            raise RecordWriteError(f"Failed to write metadata record: {exc}", path) from exc
        logger.debug("Saved metadata record %s", path)
