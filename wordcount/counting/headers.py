"""Markdown structural line detection and limit extraction."""

from __future__ import annotations

import re
from typing import Optional

from .models import HeaderMatch

# Applied in this order; a bullet may wrap a heading ("- # Title").
_BULLET_RE = re.compile(r"^\s*?[-+*]\s")
_HEADING_RE = re.compile(r"^\s*?#+?\s")
_ORDERED_RE = re.compile(r"^\s*?[0-9]\.\s")
_STRUCTURAL_PATTERNS = (_BULLET_RE, _HEADING_RE, _ORDERED_RE)

_BULLET_LINES_RE = re.compile(_BULLET_RE.pattern, re.MULTILINE)
_HEADING_LINES_RE = re.compile(_HEADING_RE.pattern, re.MULTILINE)
_ORDERED_LINES_RE = re.compile(_ORDERED_RE.pattern, re.MULTILINE)
_LINE_BREAK_RE = re.compile(r"\r\n|\r")

_LIMIT_RE = re.compile(r"\(([0-9].*)\)$")
_DIGITS_RE = re.compile(r"[0-9]+")


def is_structural_line(line: str) -> bool:
    """Return ``True`` for bullet items, headings and single-digit ordered items."""

    return any(pattern.search(line) for pattern in _STRUCTURAL_PATTERNS)


def strip_structural_prefix(text: str) -> str:
    """Remove the leading markdown marker from every line of ``text``."""

    text = _LINE_BREAK_RE.sub("\n", text)
    text = _BULLET_LINES_RE.sub("", text)
    text = _HEADING_LINES_RE.sub("", text)
    text = _ORDERED_LINES_RE.sub("", text)
    return text


def extract_limit(line: str) -> Optional[int]:
    """Return the number declared as ``(N)`` at the end of ``line``, if any."""

    from .normalize import normalize  # normalize imports this module

    match = _LIMIT_RE.search(normalize(line))
    if match is None:
        return None
    value = match.group(1)
    if not _DIGITS_RE.fullmatch(value):
        return None
    return int(value)


def classify_line(line: str) -> HeaderMatch:
    if not is_structural_line(line):
        return HeaderMatch(is_structural=False)
    return HeaderMatch(is_structural=True, limit=extract_limit(line))


__all__ = [
    "is_structural_line",
    "strip_structural_prefix",
    "extract_limit",
    "classify_line",
]
