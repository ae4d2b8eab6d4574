"""Bold and italic emphasis inside paragraph and table cell text."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")


@dataclass(slots=True)
class InlineSpan:
    """A run of text sharing the same emphasis."""

    text: str
    bold: bool = False
    italic: bool = False


def apply_emphasis(text: str) -> str:
    """Replace ``**bold**`` and then ``*italic*`` spans with HTML tags.

    Bold runs first so a doubled marker is never read as two italic markers.
    A single marker without a partner stays as a literal asterisk.
    """

    text = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    return _ITALIC_RE.sub(r"<em>\1</em>", text)


def _split_italic(text: str, *, bold: bool) -> Iterator[InlineSpan]:
    position = 0
    for match in _ITALIC_RE.finditer(text):
        if match.start() > position:
            yield InlineSpan(text[position:match.start()], bold=bold)
        yield InlineSpan(match.group(1), bold=bold, italic=True)
        position = match.end()
    if position < len(text):
        yield InlineSpan(text[position:], bold=bold)


def iter_emphasis_spans(text: str) -> Iterator[InlineSpan]:
    """Yield emphasis runs of ``text`` with markers removed.

    Italic spans are resolved separately inside and outside bold spans, so an
    italic span never crosses a bold boundary.
    """

    position = 0
    for match in _BOLD_RE.finditer(text):
        if match.start() > position:
            yield from _split_italic(text[position:match.start()], bold=False)
        yield from _split_italic(match.group(1), bold=True)
        position = match.end()
    if position < len(text):
        yield from _split_italic(text[position:], bold=False)


__all__ = ["InlineSpan", "apply_emphasis", "iter_emphasis_spans"]
