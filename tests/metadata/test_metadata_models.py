from __future__ import annotations

import pytest

from ocrmeta.metadata.models import Metadata, MetadataNode, MetadataRecord


def test_change_metadata_replaces_in_place() -> None:
    title = Metadata("TitleDocMain", "Chronik")
    old = Metadata("ocrText", "old")
    node = MetadataNode("Monograph", metadata=[title, old, Metadata("PublicationYear", "1901")])
    new = Metadata("ocrText", "new")

    node.change_metadata(old, new)

    assert [item.type_name for item in node.metadata] == ["TitleDocMain", "ocrText", "PublicationYear"]
    assert node.metadata[1] is new


def test_change_metadata_rejects_detached_metadata() -> None:
    node = MetadataNode("Monograph", metadata=[Metadata("ocrText", "old")])

    with pytest.raises(ValueError, match="not attached"):
        node.change_metadata(Metadata("ocrText", "old"), Metadata("ocrText", "new"))


def test_record_round_trip_preserves_other_sections() -> None:
    payload = {
        "physical": {"type": "BoundBook", "pages": 12},
        "logical": {
            "type": "Monograph",
            "metadata": [{"type": "TitleDocMain", "value": "Chronik"}],
            "children": [{"type": "Chapter", "metadata": [{"type": "TitleDocMain", "value": "Vorwort"}]}],
        },
    }

    record = MetadataRecord.from_dict(payload)

    assert record.logical.find_metadata("TitleDocMain") == Metadata("TitleDocMain", "Chronik")
    assert record.logical.children[0].type_name == "Chapter"
    assert record.to_dict() == payload


def test_record_without_logical_structure_is_invalid() -> None:
    with pytest.raises(ValueError, match="logical"):
        MetadataRecord.from_dict({"physical": {}})


def test_node_without_type_is_invalid() -> None:
    with pytest.raises(ValueError, match="type"):
        MetadataNode.from_dict({"metadata": []})


def test_untouched_values_and_keys_are_written_back_unchanged() -> None:
    payload = {
        "logical": {
            "type": "Monograph",
            "id": "LOG_0000",
            "metadata": [
                {"type": "Note", "value": None},
                {"type": "PublicationYear", "value": 1901},
                {"type": "Digitized", "value": True},
                {"type": "Author", "value": "Meyer", "authority": "gnd"},
                {"type": "Shelfmark"},
            ],
            "children": [],
        }
    }

    record = MetadataRecord.from_dict(payload)
    record.logical.add_metadata(Metadata("ocrText", "Text"))
    saved = record.to_dict()

    assert saved["logical"]["id"] == "LOG_0000"
    assert saved["logical"]["children"] == []
    assert saved["logical"]["metadata"][:4] == payload["logical"]["metadata"][:4]
    assert saved["logical"]["metadata"][-1] == {"type": "ocrText", "value": "Text"}


@pytest.mark.parametrize(
    "node",
    [
        {"type": "Monograph", "metadata": None},
        {"type": "Monograph", "children": None},
        {"type": "Monograph", "children": ["Chapter"]},
        {"type": "Monograph", "metadata": {"type": "ocrText"}},
    ],
)
def test_node_with_malformed_lists_is_invalid(node: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        MetadataNode.from_dict(node)
