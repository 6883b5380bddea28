"""Rule set that states which metadata types a structure node may carry."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any, Mapping

from ocrmeta.metadata.models import MetadataNode

# Occurrence codes: exactly one, at most one, one or more, any number.
_MAX_OCCURS: dict[str, int | None] = {
    "1m": 1,
    "1o": 1,
    "+": None,
    "*": None,
}

HIDDEN_PREFIX = "_"


class RuleSetError(ValueError):
    """Raised for unreadable or structurally invalid rule sets."""


@dataclass(frozen=True, slots=True)
class StructureType:
    name: str
    metadata: Mapping[str, str] = field(default_factory=dict)

    def max_occurs(self, type_name: str) -> int | None:
        return _MAX_OCCURS[self.metadata[type_name]]


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Metadata allowances per structure type."""

    structure_types: Mapping[str, StructureType] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> RuleSet:
        raw_types = payload.get("structure_types")
        if not isinstance(raw_types, dict):
            raise RuleSetError("Rule set must define 'structure_types'")

        structure_types: dict[str, StructureType] = {}
        for name, definition in raw_types.items():
            allowed = definition.get("metadata", {}) if isinstance(definition, dict) else None
            if not isinstance(allowed, dict):
                raise RuleSetError(f"Structure type {name!r} must map 'metadata' to occurrence codes")
            for type_name, occurs in allowed.items():
                if not isinstance(occurs, str) or occurs not in _MAX_OCCURS:
                    raise RuleSetError(f"Unknown occurrence code {occurs!r} for {name}.{type_name}")
            structure_types[name] = StructureType(name=name, metadata=dict(allowed))

        return cls(structure_types=structure_types)

    @classmethod
    def from_file(cls, path: str | Path) -> RuleSet:
        source = Path(path)
        try:
            payload = json.loads(source.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RuleSetError(f"Failed to load rule set {source}: {exc}") from exc
        if not isinstance(payload, dict):
            raise RuleSetError(f"Rule set {source} is not a JSON object")
        return cls.from_dict(payload)

    def addable_field_names(self, node: MetadataNode, include_hidden: bool = True) -> set[str]:
        """Return metadata types that may still be added to *node*."""

        structure_type = self.structure_types.get(node.type_name)
        if structure_type is None:
            return set()

        addable: set[str] = set()
        for type_name in structure_type.metadata:
            if not include_hidden and type_name.startswith(HIDDEN_PREFIX):
                continue
            limit = structure_type.max_occurs(type_name)
            if limit is None or node.count_metadata(type_name) < limit:
                addable.add(type_name)
        return addable
