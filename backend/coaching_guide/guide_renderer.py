"""Render guide blocks into HTML markup."""
from __future__ import annotations

import html
from dataclasses import dataclass

from .document_shell import DEFAULT_TITLE, assemble_document
from .guide_models import Block, HeadingBlock, ParagraphBlock, TableBlock
from .guide_parser import scan_blocks
from .inline_format import apply_emphasis


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Switches for the two known rendering limitations.

    keep_blank_cells:
        Keep interior table cells that are empty instead of dropping them.
    escape_html:
        Escape ``&``, ``<`` and ``>`` in generated text. Off by default, so
        markup returned by the model reaches the document as is.
    """

    keep_blank_cells: bool = False
    escape_html: bool = False


DEFAULT_OPTIONS = RenderOptions()


def _text(value: str, options: RenderOptions) -> str:
    if options.escape_html:
        return html.escape(value, quote=False)
    return value


def _inline(value: str, options: RenderOptions) -> str:
    return apply_emphasis(_text(value, options))


def _render_row(cells: list[str], tag: str, options: RenderOptions) -> str:
    rendered = "".join(f"<{tag}>{_inline(cell, options)}</{tag}>" for cell in cells)
    return f"<tr>{rendered}</tr>"


def _render_table(block: TableBlock, options: RenderOptions) -> str:
    lines = ["<table>"]
    if block.header:
        lines.extend(["<thead>", _render_row(block.header, "th", options), "</thead>"])
    lines.append("<tbody>")
    lines.extend(_render_row(row, "td", options) for row in block.rows)
    lines.extend(["</tbody>", "</table>"])
    return "\n".join(lines)


def render_block(block: Block, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """Return the markup for a single block."""

    if isinstance(block, HeadingBlock):
        return f"<h{block.level}>{_text(block.text, options)}</h{block.level}>"
    if isinstance(block, TableBlock):
        return _render_table(block, options)
    if isinstance(block, ParagraphBlock):
        return f"<p>{_inline(block.text, options)}</p>"
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def render_body(text: str, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """Render guide text into body markup without the document shell."""

    blocks = scan_blocks(text, keep_blank_cells=options.keep_blank_cells)
    return "\n".join(render_block(block, options) for block in blocks)


def render_document(
    text: str,
    options: RenderOptions = DEFAULT_OPTIONS,
    *,
    title: str = DEFAULT_TITLE,
) -> str:
    """Render guide text into a complete printable HTML document."""

    return assemble_document(render_body(text, options), title=title)


__all__ = ["DEFAULT_OPTIONS", "RenderOptions", "render_block", "render_body", "render_document"]
