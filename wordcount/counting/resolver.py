"""Pair a body line with the limit declared on the structural line above it."""

from __future__ import annotations

from typing import Callable, Sequence

from .headers import extract_limit, is_structural_line
from .models import NO_LIMIT, CountResult
from .normalize import count

LineAccessor = Callable[[int], str]


class LineOutOfRange(IndexError):
    """Raised when a line index falls outside the document."""

    def __init__(self, index: int, line_count: int) -> None:
        super().__init__(f"line {index} is outside a document of {line_count} line(s)")
        self.index = index
        self.line_count = line_count


def lines_accessor(lines: Sequence[str]) -> LineAccessor:
    """Wrap ``lines`` in a read-only accessor that rejects out-of-range indexes."""

    snapshot = tuple(lines)

    def line_at(index: int) -> str:
        if index < 0 or index >= len(snapshot):
            raise LineOutOfRange(index, len(snapshot))
        return snapshot[index]

    return line_at


def _limit_or_sentinel(line: str) -> int:
    limit = extract_limit(line)
    return NO_LIMIT if limit is None else limit


def resolve(cursor_line: int, line_at: LineAccessor) -> CountResult:
    """Return the ``(count, limit)`` pair for the cursor position.

    On a structural line the limit comes from the line itself and the count from
    the line below it. On a body line both come from the structural line above,
    if there is one. The caller must not place the cursor on a structural last
    line: the lookup of the following line raises :class:`LineOutOfRange`.
    """

    cursor_text = line_at(cursor_line)
    if is_structural_line(cursor_text):
        limit = _limit_or_sentinel(cursor_text)
        return CountResult(count=count(line_at(cursor_line + 1)), limit=limit)

    if cursor_line == 0:
        return CountResult.none()

    previous_text = line_at(cursor_line - 1)
    if not is_structural_line(previous_text):
        return CountResult.none()
    return CountResult(count=count(cursor_text), limit=_limit_or_sentinel(previous_text))


__all__ = ["LineAccessor", "LineOutOfRange", "lines_accessor", "resolve"]
