"""Reduce markdown text to the characters that count towards a limit."""

from __future__ import annotations

import re

from .headers import strip_structural_prefix

# Literal "< ... <" span, kept as-is; it is not an HTML tag matcher.
_ANGLE_SPAN_RE = re.compile(r"(< ([^>]+)<)")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Strip structural markers, angle spans and every whitespace character.

    Structural markers are removed first: they are recognised by the whitespace
    that follows them, which the later passes delete.
    """

    text = strip_structural_prefix(text)
    text = _ANGLE_SPAN_RE.sub("", text)
    text = _WHITESPACE_RE.sub("", text)
    return text.strip()


def count(text: str) -> int:
    """Return the normalised character length of ``text``."""

    normalised = normalize(text)
    if not normalised:
        return 0
    return len(normalised)


__all__ = ["normalize", "count"]
