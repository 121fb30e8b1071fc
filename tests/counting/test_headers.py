from __future__ import annotations

import pytest

from wordcount.counting.headers import (
    classify_line,
    extract_limit,
    is_structural_line,
    strip_structural_prefix,
)
from wordcount.counting.models import HeaderMatch


@pytest.mark.parametrize(
    "line",
    [
        "- item",
        "+ item",
        "* item",
        "## Heading (500)",
        "# Title",
        "###### Deep",
        "3. third",
        "   - item",
        "  ## Heading (500)",
        "\t3. third",
    ],
)
def test_structural_lines(line: str) -> None:
    assert is_structural_line(line)


@pytest.mark.parametrize(
    "line",
    [
        "plain text",
        "  not a header (100)",
        "-item",
        "#hashtag",
        "10. tenth",
        "---",
        "",
    ],
)
def test_non_structural_lines(line: str) -> None:
    assert not is_structural_line(line)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "- item",
        "## Heading (500)\n- a\n- b",
        "plain text",
        "  3. third\n#nope",
        "- # Title",
    ],
)
def test_strip_never_grows(text: str) -> None:
    assert len(strip_structural_prefix(text)) <= len(text)


def test_strip_passes_run_in_order() -> None:
    assert strip_structural_prefix("- # Title") == "Title"
    assert strip_structural_prefix("# 1. Title") == "Title"
    assert strip_structural_prefix("1. - item") == "- item"


def test_strip_leaves_plain_lines_untouched() -> None:
    text = "## Heading\nplain line\n- bullet"
    assert strip_structural_prefix(text) == "Heading\nplain line\nbullet"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("## Section (1200)", 1200),
        ("## Section", None),
        ("## Section (abc)", None),
        ("## Section (12a)", None),
        ("## Section (1_200)", None),
        ("## (100) Section", None),
        ("## Section (1200)  ", 1200),
        ("## Section ( 1 200 )", 1200),
        ("- Item (5)", 5),
        ("Plain line (40)", 40),
    ],
)
def test_extract_limit(line: str, expected: int | None) -> None:
    assert extract_limit(line) == expected


def test_classify_line() -> None:
    assert classify_line("## Intro (100)") == HeaderMatch(is_structural=True, limit=100)
    assert classify_line("- item") == HeaderMatch(is_structural=True, limit=None)
    assert classify_line("plain (100)") == HeaderMatch(is_structural=False, limit=None)


def test_strip_treats_carriage_returns_as_line_breaks() -> None:
    assert strip_structural_prefix("a\r- item") == "a\nitem"
    assert strip_structural_prefix("a\r\n## Title\r3. third") == "a\nTitle\nthird"
