"""Block definitions produced by the guide scanner."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

BlockType = Literal["heading", "paragraph", "table"]


@dataclass(slots=True)
class HeadingBlock:
    """A heading line such as ``## Great Moments``.

    Parameters
    ----------
    level:
        Number of leading ``#`` markers, between 1 and 3.
    text:
        Heading text with the marker prefix removed.
    """

    level: int
    text: str
    type: BlockType = field(default="heading", init=False)


@dataclass(slots=True)
class ParagraphBlock:
    """Free text lines grouped between blank lines, kept verbatim."""

    text: str
    type: BlockType = field(default="paragraph", init=False)


@dataclass(slots=True)
class TableBlock:
    """A pipe table with one header row and one or more body rows."""

    header: list[str]
    rows: list[list[str]]
    type: BlockType = field(default="table", init=False)

    @property
    def column_count(self) -> int:
        return len(self.header)


Block = Union[HeadingBlock, ParagraphBlock, TableBlock]


__all__ = ["Block", "BlockType", "HeadingBlock", "ParagraphBlock", "TableBlock"]
