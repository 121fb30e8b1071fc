"""Whole-document view of every section that declares a limit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .headers import classify_line
from .normalize import count


@dataclass(frozen=True, slots=True)
class SectionCount:
    line: int
    heading: str
    limit: int
    count: int

    @property
    def over_limit(self) -> bool:
        return self.count > self.limit


def section_report(lines: Sequence[str]) -> List[SectionCount]:
    """Return one entry per structural line with a limit and a following line.

    The body of a section is the single line right after its heading, matching
    what the cursor-based lookup pairs together.
    """

    sections: List[SectionCount] = []
    for index, line in enumerate(lines[:-1]):
        match = classify_line(line)
        if not match.is_structural or match.limit is None:
            continue
        sections.append(
            SectionCount(
                line=index,
                heading=line.strip(),
                limit=match.limit,
                count=count(lines[index + 1]),
            )
        )
    return sections


__all__ = ["SectionCount", "section_report"]
