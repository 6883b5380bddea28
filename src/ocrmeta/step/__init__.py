"""Step-level configuration, errors and journal interfaces."""

from .errors import (
    AltoParseError,
    FieldNotAllowedError,
    NoOcrSourceError,
    NoTextExtractedError,
    RecordReadError,
    RecordWriteError,
    StepError,
    TextFileReadError,
)

__all__ = [
    "AltoParseError",
    "FieldNotAllowedError",
    "NoOcrSourceError",
    "NoTextExtractedError",
    "RecordReadError",
    "RecordWriteError",
    "StepError",
    "TextFileReadError",
]
