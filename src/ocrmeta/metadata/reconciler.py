"""Replace or add a single metadata field on a structure node."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol

from ocrmeta.metadata.models import Metadata, MetadataNode
from ocrmeta.step.errors import FieldNotAllowedError

logger = logging.getLogger(__name__)


class AddableFieldProvider(Protocol):
    def addable_field_names(self, node: MetadataNode, include_hidden: bool = True) -> set[str]:
        """Return the metadata types that may still be added to *node*."""


@dataclass(frozen=True, slots=True)
class FieldCheck:
    """Outcome of the existence and addability checks for one field."""

    type_name: str
    existing: Metadata | None = None

    @property
    def action(self) -> str:
        return "replace" if self.existing is not None else "add"


def check_field(node: MetadataNode, type_name: str, provider: AddableFieldProvider) -> FieldCheck:
    """Find the metadata to replace, or confirm that a new one may be added."""

    existing = node.find_metadata(type_name)
    if existing is not None:
        return FieldCheck(type_name=type_name, existing=existing)

    if type_name not in provider.addable_field_names(node, include_hidden=True):
        raise FieldNotAllowedError(f"Metadata type {type_name!r} is not allowed on {node.type_name!r}")
    return FieldCheck(type_name=type_name)


def apply_field(node: MetadataNode, check: FieldCheck, value: str) -> Metadata:
    new_metadata = Metadata(type_name=check.type_name, value=value)
    if check.existing is not None:
        logger.debug("Replacing existing metadata %s on %s", check.type_name, node.type_name)
        node.change_metadata(check.existing, new_metadata)
    else:
        logger.debug("Adding new metadata %s to %s", check.type_name, node.type_name)
        node.add_metadata(new_metadata)
    return new_metadata


def reconcile(node: MetadataNode, type_name: str, value: str, provider: AddableFieldProvider) -> Metadata:
    """Leave exactly one metadata of *type_name* on *node*, holding *value*."""

    return apply_field(node, check_field(node, type_name, provider), value)
