"""Split generated guide text into heading, table and paragraph blocks."""
from __future__ import annotations

import logging
import re

from .guide_models import Block, HeadingBlock, ParagraphBlock, TableBlock

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^(#{1,3}) (.*)$")
_TABLE_ROW_RE = re.compile(r"^\|.*\|$")
_SEPARATOR_RE = re.compile(r"^\|[\s|-]*-[\s|-]*\|$")


def classify_heading(line: str) -> HeadingBlock | None:
    """Return a heading block for ``#``, ``##`` or ``###`` lines, otherwise ``None``."""

    match = _HEADING_RE.match(line.rstrip("\r"))
    if match is None:
        return None
    return HeadingBlock(level=len(match.group(1)), text=match.group(2).strip())


def is_table_row(line: str) -> bool:
    stripped = line.strip()
    return len(stripped) >= 2 and _TABLE_ROW_RE.match(stripped) is not None


def is_separator_row(line: str) -> bool:
    """Check whether the line is a ``|---|---|`` row separating header and body."""

    return _SEPARATOR_RE.match(line.strip()) is not None


def split_table_row(line: str, *, keep_blank_cells: bool = False) -> list[str]:
    """Split a pipe row into trimmed cells.

    Cells that trim to an empty string are dropped, which also removes blank
    cells written on purpose. With ``keep_blank_cells`` only the artifacts of
    the leading and trailing pipe are removed.
    """

    cells = [cell.strip() for cell in line.strip().split("|")]
    if not keep_blank_cells:
        return [cell for cell in cells if cell]

    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]
    return cells


def match_table(
    lines: list[str], start: int, *, keep_blank_cells: bool = False
) -> tuple[TableBlock, int] | None:
    """Try to read a table starting at ``lines[start]``.

    Returns the table and the index of the first line after it, or ``None``
    when the header, separator and at least one body row are not all present.
    """

    if start + 2 >= len(lines):
        return None
    header_line, separator_line = lines[start], lines[start + 1]
    if not is_table_row(header_line) or not is_separator_row(separator_line):
        return None

    cursor = start + 2
    body_lines: list[str] = []
    while cursor < len(lines) and is_table_row(lines[cursor]):
        body_lines.append(lines[cursor])
        cursor += 1
    if not body_lines:
        return None

    header = split_table_row(header_line, keep_blank_cells=keep_blank_cells)
    rows = [split_table_row(line, keep_blank_cells=keep_blank_cells) for line in body_lines]
    return TableBlock(header=header, rows=rows), cursor


def scan_blocks(text: str, *, keep_blank_cells: bool = False) -> list[Block]:
    """Partition ``text`` into blocks in document order.

    Headings and tables are recognised line by line, so they form their own
    blocks even when no blank line separates them from surrounding text.
    Every other non-blank line joins the current paragraph.
    """

    lines = text.split("\n")
    blocks: list[Block] = []
    paragraph: list[str] = []

    def flush_paragraph() -> None:
        nonlocal paragraph
        if paragraph:
            blocks.append(ParagraphBlock(text="\n".join(paragraph)))
            paragraph = []

    index = 0
    while index < len(lines):
        line = lines[index]
        if not line.strip():
            if paragraph and not line and index == len(lines) - 1:
                # keep the final line terminator of a closing paragraph
                paragraph.append(line)
            flush_paragraph()
            index += 1
            continue

        heading = classify_heading(line)
        if heading is not None:
            flush_paragraph()
            blocks.append(heading)
            index += 1
            continue

        table = match_table(lines, index, keep_blank_cells=keep_blank_cells)
        if table is not None:
            flush_paragraph()
            block, index = table
            blocks.append(block)
            continue

        paragraph.append(line)
        index += 1

    flush_paragraph()
    logger.debug("Scanned %s blocks from %s lines", len(blocks), len(lines))
    return blocks


__all__ = [
    "classify_heading",
    "is_separator_row",
    "is_table_row",
    "match_table",
    "scan_blocks",
    "split_table_row",
]
