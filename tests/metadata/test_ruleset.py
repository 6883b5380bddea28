from __future__ import annotations

import json
from pathlib import Path

import pytest

from ocrmeta.metadata.models import Metadata, MetadataNode
from ocrmeta.metadata.ruleset import RuleSet, RuleSetError

_RULES = {
    "structure_types": {
        "Monograph": {
            "metadata": {
                "TitleDocMain": "1m",
                "ocrText": "1o",
                "SubjectTopic": "+",
                "_ocrRaw": "*",
            }
        }
    }
}


def test_addable_names_include_hidden_types_by_default() -> None:
    ruleset = RuleSet.from_dict(_RULES)
    node = MetadataNode("Monograph")

    assert ruleset.addable_field_names(node) == {"TitleDocMain", "ocrText", "SubjectTopic", "_ocrRaw"}
    assert "_ocrRaw" not in ruleset.addable_field_names(node, include_hidden=False)


def test_single_occurrence_types_stop_being_addable_once_present() -> None:
    ruleset = RuleSet.from_dict(_RULES)
    node = MetadataNode(
        "Monograph",
        metadata=[Metadata("TitleDocMain", "Chronik"), Metadata("ocrText", "x"), Metadata("SubjectTopic", "a")],
    )

    assert ruleset.addable_field_names(node) == {"SubjectTopic", "_ocrRaw"}


def test_unknown_structure_type_allows_nothing() -> None:
    assert RuleSet.from_dict(_RULES).addable_field_names(MetadataNode("Periodical")) == set()


def test_invalid_occurrence_code_is_rejected() -> None:
    with pytest.raises(RuleSetError, match="occurrence code"):
        RuleSet.from_dict({"structure_types": {"Monograph": {"metadata": {"ocrText": "2"}}}})


def test_from_file_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "ruleset.json"
    path.write_text(json.dumps(_RULES), encoding="utf-8")

    assert "ocrText" in RuleSet.from_file(path).addable_field_names(MetadataNode("Monograph"))


def test_from_file_wraps_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "ruleset.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(RuleSetError):
        RuleSet.from_file(path)


@pytest.mark.parametrize("occurs", [["1o"], {"max": 1}, 1, None])
def test_non_string_occurrence_code_is_rejected(occurs: object) -> None:
    with pytest.raises(RuleSetError, match="occurrence code"):
        RuleSet.from_dict({"structure_types": {"Monograph": {"metadata": {"ocrText": occurs}}}})
