"""In-memory form of a hierarchical bibliographic metadata record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Metadata:
    """One typed field value attached to a structure node.

    ``value`` is kept exactly as loaded and ``extra`` holds any other keys of
    the stored entry, so untouched fields are written back unchanged.
    """

    type_name: str
    value: Any = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Any, node_type: str) -> Metadata:
        if not isinstance(payload, dict) or not isinstance(payload.get("type"), str):
            raise ValueError(f"Invalid metadata entry on node {node_type!r}: {payload!r}")
        extra = {key: value for key, value in payload.items() if key not in {"type", "value"}}
        return cls(type_name=payload["type"], value=payload.get("value", ""), extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {**self.extra, "type": self.type_name, "value": self.value}


def _list_field(payload: dict[str, Any], key: str, node_type: str) -> list[Any]:
    items = payload.get(key, [])
    if not isinstance(items, list):
        raise ValueError(f"'{key}' of node {node_type!r} must be a list, got {type(items).__name__}")
    return items


@dataclass(slots=True)
class MetadataNode:
    """A structure node owning an ordered list of metadata and child nodes."""

    type_name: str
    metadata: list[Metadata] = field(default_factory=list)
    children: list[MetadataNode] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def find_metadata(self, type_name: str) -> Metadata | None:
        """Return the first metadata of *type_name*, if any."""

        for item in self.metadata:
            if item.type_name == type_name:
                return item
        return None

    def count_metadata(self, type_name: str) -> int:
        return sum(1 for item in self.metadata if item.type_name == type_name)

    def add_metadata(self, item: Metadata) -> None:
        self.metadata.append(item)

    def change_metadata(self, old: Metadata, new: Metadata) -> None:
        """Put *new* into the slot held by *old* in a single assignment."""

        for index, item in enumerate(self.metadata):
            if item is old:
                self.metadata[index] = new
                return
        raise ValueError(f"Metadata {old.type_name!r} is not attached to node {self.type_name!r}")

    @classmethod
    def from_dict(cls, payload: Any) -> MetadataNode:
        if not isinstance(payload, dict):
            raise ValueError(f"Structure node must be an object, got {type(payload).__name__}")
        type_name = payload.get("type")
        if not isinstance(type_name, str) or not type_name:
            raise ValueError("Structure node is missing its 'type'")

        metadata = [Metadata.from_dict(entry, type_name) for entry in _list_field(payload, "metadata", type_name)]
        children = [cls.from_dict(child) for child in _list_field(payload, "children", type_name)]
        # An explicit empty "children" list stays in extra so it is written back as-is.
        owned = {"type", "metadata", "children"} if children else {"type", "metadata"}
        extra = {key: value for key, value in payload.items() if key not in owned}
        return cls(type_name=type_name, metadata=metadata, children=children, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            **self.extra,
            "type": self.type_name,
            "metadata": [item.to_dict() for item in self.metadata],
        }
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload


@dataclass(slots=True)
class MetadataRecord:
    """A loaded record: the logical root plus untouched top-level sections."""

    logical: MetadataNode
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> MetadataRecord:
        logical = payload.get("logical")
        if not isinstance(logical, dict):
            raise ValueError("Record has no logical structure")
        extra = {key: value for key, value in payload.items() if key != "logical"}
        return cls(logical=MetadataNode.from_dict(logical), extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {**self.extra, "logical": self.logical.to_dict()}
