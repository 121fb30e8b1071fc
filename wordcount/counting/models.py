"""Value objects produced by the counting engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

NO_LIMIT = -1


@dataclass(frozen=True, slots=True)
class HeaderMatch:
    """Classification of a single line."""

    is_structural: bool
    limit: Optional[int] = None


@dataclass(frozen=True, slots=True)
class CountResult:
    """A ``(count, limit)`` pair; ``-1`` in either slot means no limit context."""

    count: int
    limit: int

    @classmethod
    def none(cls) -> "CountResult":
        return cls(count=NO_LIMIT, limit=NO_LIMIT)

    @property
    def has_limit(self) -> bool:
        return self.count != NO_LIMIT and self.limit != NO_LIMIT

    def as_tuple(self) -> tuple[int, int]:
        return (self.count, self.limit)


__all__ = ["NO_LIMIT", "HeaderMatch", "CountResult"]
