"""Counting engine: markdown structure detection, normalisation and limit lookup."""

from .headers import classify_line, extract_limit, is_structural_line, strip_structural_prefix
from .models import NO_LIMIT, CountResult, HeaderMatch
from .normalize import count, normalize
from .report import SectionCount, section_report
from .resolver import LineOutOfRange, lines_accessor, resolve

__all__ = [
    "NO_LIMIT",
    "CountResult",
    "HeaderMatch",
    "LineOutOfRange",
    "SectionCount",
    "classify_line",
    "count",
    "extract_limit",
    "is_structural_line",
    "lines_accessor",
    "normalize",
    "resolve",
    "section_report",
    "strip_structural_prefix",
]
