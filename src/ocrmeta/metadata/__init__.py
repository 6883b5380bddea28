"""Metadata record model, rule set and field reconciliation."""

from .models import Metadata, MetadataNode, MetadataRecord
from .reconciler import FieldCheck, apply_field, check_field, reconcile
from .ruleset import RuleSet, RuleSetError
from .store import JsonRecordStore

__all__ = [
    "FieldCheck",
    "JsonRecordStore",
    "Metadata",
    "MetadataNode",
    "MetadataRecord",
    "RuleSet",
    "RuleSetError",
    "apply_field",
    "check_field",
    "reconcile",
]
