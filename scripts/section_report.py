"""Print the count of every limited section in a markdown file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Sequence

from wordcount.config import get_settings
from wordcount.counting.report import SectionCount, section_report
from wordcount.host.buffer import split_lines
from wordcount.host.display import format_label


def render(sections: Sequence[SectionCount], *, unit_label: str) -> List[str]:
    rows: List[str] = []
    for item in sections:
        marker = "!" if item.over_limit else " "
        label = format_label(item.count, item.limit, unit_label=unit_label)
        rows.append(f"{marker} {item.line + 1:>5}  {label:<20}  {item.heading}")
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="Markdown file to inspect")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    args = parser.parse_args(argv)

    if not args.path.exists():
        print(f"File not found: {args.path}", file=sys.stderr)
        return 2

    lines = split_lines(args.path.read_text(encoding="utf-8"))
    sections = section_report(lines)

    if args.json:
        payload = [
            {
                "line": item.line,
                "heading": item.heading,
                "limit": item.limit,
                "count": item.count,
                "over_limit": item.over_limit,
            }
            for item in sections
        ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for row in render(sections, unit_label=get_settings().unit_label):
            print(row)

    return 1 if any(item.over_limit for item in sections) else 0


if __name__ == "__main__":  # pragma: no cover - manual tool
    raise SystemExit(main())
