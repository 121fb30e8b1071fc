"""Live character counts for markdown documents with per-section limits."""

from .counting import (
    NO_LIMIT,
    CountResult,
    HeaderMatch,
    LineOutOfRange,
    count,
    extract_limit,
    is_structural_line,
    normalize,
    resolve,
    strip_structural_prefix,
)
from .host import TextBufferHost, WordCounter, WordCounterController, activate, format_label

__all__ = [
    "NO_LIMIT",
    "CountResult",
    "HeaderMatch",
    "LineOutOfRange",
    "TextBufferHost",
    "WordCounter",
    "WordCounterController",
    "activate",
    "count",
    "extract_limit",
    "format_label",
    "is_structural_line",
    "normalize",
    "resolve",
    "strip_structural_prefix",
]
