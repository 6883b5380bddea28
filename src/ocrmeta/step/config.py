"""Runtime configuration for the OCR-to-metadata step."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(*, name: str, raw_value: str, default: bool) -> bool:
    value = raw_value.strip().lower()
    if not value:
        return default
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of: {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}")


@dataclass(frozen=True, slots=True)
class StepSettings:
    """Validated settings for one configured step."""

    metadata_field: str
    ruleset_path: Path | None = None
    strict_files: bool = False
    keep_backup: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "StepSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        metadata_field = source.get("OCRMETA_METADATA_FIELD", "").strip()
        if not metadata_field:
            raise ValueError("Missing required step environment variable: OCRMETA_METADATA_FIELD")

        ruleset_raw = source.get("OCRMETA_RULESET_PATH", "").strip()
        strict_files = _parse_bool(
            name="OCRMETA_STRICT_FILES",
            raw_value=source.get("OCRMETA_STRICT_FILES", ""),
            default=False,
        )
        keep_backup = _parse_bool(
            name="OCRMETA_KEEP_BACKUP",
            raw_value=source.get("OCRMETA_KEEP_BACKUP", ""),
            default=True,
        )

        return cls(
            metadata_field=metadata_field,
            ruleset_path=Path(ruleset_raw) if ruleset_raw else None,
            strict_files=strict_files,
            keep_backup=keep_backup,
        )
