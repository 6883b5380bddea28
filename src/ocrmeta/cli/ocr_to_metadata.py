"""CLI command that writes a process's OCR text into its metadata record."""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from ocrmeta.metadata.ruleset import RuleSet
from ocrmeta.metadata.store import JsonRecordStore
from ocrmeta.step.config import StepSettings
from ocrmeta.step.journal import ProcessJournal
from ocrmeta.step.runner import OcrToMetadataStep
from ocrmeta.step.work_item import WorkItem

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fold OCR text or ALTO output into one metadata field")
    parser.add_argument("--process-dir", required=True, help="Process directory holding meta.json and ocr/")
    parser.add_argument("--title", required=True, help="Process title used to name the OCR subfolders")
    parser.add_argument("--process-id", type=int, default=0, help="Process id for journal entries (0 disables)")
    parser.add_argument("--metadata-field", help="Metadata type to fill (overrides OCRMETA_METADATA_FIELD)")
    parser.add_argument("--ruleset", help="Rule set JSON path (overrides OCRMETA_RULESET_PATH)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first unreadable OCR file instead of skipping it",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _load_settings(args: argparse.Namespace) -> StepSettings:
    environ = dict(os.environ)
    if args.metadata_field:
        environ["OCRMETA_METADATA_FIELD"] = args.metadata_field
    if args.ruleset:
        environ["OCRMETA_RULESET_PATH"] = args.ruleset
    if args.strict:
        environ["OCRMETA_STRICT_FILES"] = "true"

    settings = StepSettings.from_env(environ)
    if settings.ruleset_path is None:
        raise ValueError("A rule set is required: pass --ruleset or set OCRMETA_RULESET_PATH")
    return settings


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = _load_settings(args)
        ruleset = RuleSet.from_file(settings.ruleset_path)
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 2

    item = WorkItem(process_id=args.process_id, title=args.title, process_dir=Path(args.process_dir))
    step = OcrToMetadataStep(
        settings,
        JsonRecordStore(keep_backup=settings.keep_backup),
        ruleset,
        ProcessJournal(item.journal_file, item.process_id),
    )
    result = step.run(item)

    print(json.dumps(result.to_dict(), ensure_ascii=True, indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
