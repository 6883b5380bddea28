from __future__ import annotations

import json
from pathlib import Path

import pytest

from ocrmeta.metadata.models import Metadata
from ocrmeta.metadata.store import JsonRecordStore
from ocrmeta.step.errors import RecordReadError, RecordWriteError
from ocrmeta.step.work_item import WorkItem


def _item(tmp_path: Path) -> WorkItem:
    return WorkItem(process_id=7, title="chronik_1901", process_dir=tmp_path)


def _write_record(item: WorkItem, payload: object) -> None:
    item.metadata_file.write_text(json.dumps(payload), encoding="utf-8")


def test_read_and_write_round_trip_with_backup(tmp_path: Path) -> None:
    item = _item(tmp_path)
    _write_record(item, {"logical": {"type": "Monograph", "metadata": []}, "fileGroups": ["PRESENTATION"]})
    store = JsonRecordStore()

    record = store.read_record(item)
    record.logical.add_metadata(Metadata("ocrText", "Text"))
    store.write_record(item, record)

    saved = json.loads(item.metadata_file.read_text(encoding="utf-8"))
    backup = json.loads((tmp_path / "meta.json.bak").read_text(encoding="utf-8"))
    assert saved["logical"]["metadata"] == [{"type": "ocrText", "value": "Text"}]
    assert saved["fileGroups"] == ["PRESENTATION"]
    assert backup["logical"]["metadata"] == []
    assert not (tmp_path / "meta.json.tmp").exists()


def test_backup_can_be_disabled(tmp_path: Path) -> None:
    item = _item(tmp_path)
    _write_record(item, {"logical": {"type": "Monograph"}})
    store = JsonRecordStore(keep_backup=False)

    store.write_record(item, store.read_record(item))

    assert not (tmp_path / "meta.json.bak").exists()


def test_missing_record_raises_read_error(tmp_path: Path) -> None:
    with pytest.raises(RecordReadError) as excinfo:
        JsonRecordStore().read_record(_item(tmp_path))

    assert excinfo.value.path == tmp_path / "meta.json"


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"physical": {}}',
        '{"logical": {"type": "Monograph", "metadata": null}}',
        '{"logical": {"type": "Monograph", "children": null}}',
        '{"logical": {"type": "Monograph", "children": [42]}}',
    ],
)
def test_invalid_record_raises_read_error(tmp_path: Path, content: str) -> None:
    item = _item(tmp_path)
    item.metadata_file.write_text(content, encoding="utf-8")

    with pytest.raises(RecordReadError):
        JsonRecordStore().read_record(item)


def test_unwritable_location_raises_write_error(tmp_path: Path) -> None:
    item = _item(tmp_path)
    _write_record(item, {"logical": {"type": "Monograph"}})
    record = JsonRecordStore().read_record(item)
    missing_dir_item = WorkItem(process_id=7, title="chronik_1901", process_dir=tmp_path / "gone")

    with pytest.raises(RecordWriteError):
        JsonRecordStore().write_record(missing_dir_item, record)


def test_non_utf8_record_raises_read_error(tmp_path: Path) -> None:
    item = _item(tmp_path)
    item.metadata_file.write_bytes(b'{"logical": {"type": "M\xe4rchen"}}')

    with pytest.raises(RecordReadError, match="Failed to read metadata record"):
        JsonRecordStore().read_record(item)
