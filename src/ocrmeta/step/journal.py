"""Journal sinks that receive step messages for the host's process log."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

MESSAGE_PREFIX = "OcrToMetadata step: "


class JournalLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


_LOGGING_LEVELS: dict[JournalLevel, int] = {
    JournalLevel.DEBUG: logging.DEBUG,
    JournalLevel.INFO: logging.INFO,
    JournalLevel.WARN: logging.WARNING,
    JournalLevel.ERROR: logging.ERROR,
}


@runtime_checkable
class JournalSink(Protocol):
    """Fire-and-forget message sink supplied by the host."""

    def record(self, level: JournalLevel, message: str) -> None:
        """Store one message; must never raise into the caller."""


class LoggingJournal:
    """Route journal messages to a stdlib logger."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def record(self, level: JournalLevel, message: str) -> None:
        self._logger.log(_LOGGING_LEVELS[level], "%s%s", MESSAGE_PREFIX, message)


class ProcessJournal(LoggingJournal):
    """Log messages and append them as JSON lines to the process journal file."""

    def __init__(self, journal_path: str | Path, process_id: int, target: logging.Logger | None = None) -> None:
        super().__init__(target)
        self._journal_path = Path(journal_path)
        self._process_id = process_id

    @property
    def journal_path(self) -> Path:
        return self._journal_path

    def record(self, level: JournalLevel, message: str) -> None:
        super().record(level, message)
        if self._process_id <= 0:
            return

        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "process_id": self._process_id,
            "level": level.value,
            "message": f"{MESSAGE_PREFIX}{message}",
        }
        try:
            with self._journal_path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except OSError as exc:
            logger.warning("Failed to append to process journal %s: %s", self._journal_path, exc)
