"""Unit tests for splitting guide text into blocks."""

from __future__ import annotations

import pytest

from coaching_guide.guide_models import HeadingBlock, ParagraphBlock, TableBlock
from coaching_guide.guide_parser import (
    classify_heading,
    is_separator_row,
    match_table,
    scan_blocks,
    split_table_row,
)


@pytest.mark.parametrize(
    ("line", "level", "text"),
    [
        ("# Coaching Guide", 1, "Coaching Guide"),
        ("## Great Moments", 2, "Great Moments"),
        ("### Showing empathy", 3, "Showing empathy"),
    ],
)
def test_classify_heading_levels(line: str, level: int, text: str) -> None:
    heading = classify_heading(line)

    assert heading == HeadingBlock(level=level, text=text)


@pytest.mark.parametrize("line", ["#### Too deep", "##No space", "Plain text", " ## Indented", ""])
def test_non_heading_lines_are_deferred(line: str) -> None:
    assert classify_heading(line) is None


def test_split_table_row_drops_blank_cells() -> None:
    assert split_table_row("| A | B | C |") == ["A", "B", "C"]
    assert split_table_row("| 1 |  | 3 |") == ["1", "3"]


def test_split_table_row_can_keep_interior_blank_cells() -> None:
    assert split_table_row("| 1 |  | 3 |", keep_blank_cells=True) == ["1", "", "3"]


@pytest.mark.parametrize("line", ["|---|---|", "| --- | --- |", "|-|"])
def test_separator_rows(line: str) -> None:
    assert is_separator_row(line)


@pytest.mark.parametrize("line", ["| A | B |", "|:---:|---|", "| | |", "---"])
def test_rows_that_are_not_separators(line: str) -> None:
    assert not is_separator_row(line)


def test_match_table_reads_header_and_body() -> None:
    lines = ["| A | B | C |", "|---|---|---|", "| 1 | 2 | 3 |", "after"]

    matched = match_table(lines, 0)

    assert matched is not None
    table, next_index = matched
    assert table.header == ["A", "B", "C"]
    assert table.rows == [["1", "2", "3"]]
    assert table.column_count == 3
    assert next_index == 3


def test_match_table_requires_a_body_row() -> None:
    assert match_table(["| A | B |", "|---|---|"], 0) is None
    assert match_table(["| A | B |", "|---|---|", "text"], 0) is None


def test_scan_blocks_keeps_ragged_rows() -> None:
    text = "| A | B | C |\n|---|---|---|\n| 1 |  | 3 |\n| x | y | z |"

    blocks = scan_blocks(text)

    assert blocks == [TableBlock(header=["A", "B", "C"], rows=[["1", "3"], ["x", "y", "z"]])]


def test_invalid_separator_falls_back_to_paragraph() -> None:
    text = "| A | B |\n| not a separator |\n| 1 | 2 |"

    blocks = scan_blocks(text)

    assert blocks == [ParagraphBlock(text=text)]


def test_scan_blocks_orders_mixed_content() -> None:
    text = (
        "# Coaching Guide\n"
        "\n"
        "## Conversation Summary\n"
        "First line.\n"
        "Second line.\n"
        "\n"
        "Another paragraph.\n"
        "\n"
        "## Coaching Scorecard\n"
        "| Skill | Score |\n"
        "|-------|-------|\n"
        "| Listening | 4/5 |\n"
    )

    blocks = scan_blocks(text)

    assert [block.type for block in blocks] == [
        "heading",
        "heading",
        "paragraph",
        "paragraph",
        "heading",
        "table",
    ]
    assert blocks[2] == ParagraphBlock(text="First line.\nSecond line.")
    assert blocks[5] == TableBlock(header=["Skill", "Score"], rows=[["Listening", "4/5"]])


def test_heading_and_table_split_from_adjacent_text() -> None:
    text = "Intro line\n## Section\nBody line\n| A | B |\n|---|---|\n| 1 | 2 |\nClosing line"

    blocks = scan_blocks(text)

    assert blocks == [
        ParagraphBlock(text="Intro line"),
        HeadingBlock(level=2, text="Section"),
        ParagraphBlock(text="Body line"),
        TableBlock(header=["A", "B"], rows=[["1", "2"]]),
        ParagraphBlock(text="Closing line"),
    ]


def test_blank_input_has_no_blocks() -> None:
    assert scan_blocks("") == []
    assert scan_blocks("\n   \n\n") == []
