"""Error taxonomy for the OCR-to-metadata step."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class StepError(Exception):
    """Domain error raised by any stage of the step."""

    message: str
    path: Path | None = None

    code = "StepError"

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} (path={self.path})"


class NoOcrSourceError(StepError):
    """Neither the text nor the ALTO directory is available."""

    code = "NoOcrSource"


class AltoParseError(StepError):
    """One ALTO file is malformed or unreadable."""

    code = "AltoParseError"


class TextFileReadError(StepError):
    """One plain-text OCR file is unreadable."""

    code = "TextFileReadError"


class NoTextExtractedError(StepError):
    code = "NoTextExtracted"


class FieldNotAllowedError(StepError):
    """The configured field is neither present nor addable on the node."""

    code = "FieldNotAllowed"


class RecordReadError(StepError):
    code = "RecordReadError"


class RecordWriteError(StepError):
    code = "RecordWriteError"
