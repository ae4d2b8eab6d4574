"""Export guide text into a DOCX document."""
from __future__ import annotations

import re
from io import BytesIO

from docx import Document
from docx.document import Document as _Document
from docx.text.paragraph import Paragraph

from .guide_models import HeadingBlock, ParagraphBlock, TableBlock
from .guide_parser import scan_blocks
from .inline_format import iter_emphasis_spans

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_XML_INCOMPATIBLE_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff\ud800-\udfff]")


def _xml_safe(value: str) -> str:
    """Drop control characters that cannot be stored in a DOCX part."""

    return _XML_INCOMPATIBLE_RE.sub("", value)


def _remove_placeholder_paragraph(document: _Document) -> None:
    """Remove an empty leading paragraph left by the default template."""

    if document.paragraphs and not document.paragraphs[0].text:
        element = document.paragraphs[0]._element  # type: ignore[attr-defined]
        parent = element.getparent()
        if parent is not None:
            parent.remove(element)


def _add_runs(paragraph: Paragraph, text: str, *, bold: bool = False) -> None:
    for span in iter_emphasis_spans(text):
        run = paragraph.add_run(_xml_safe(span.text))
        run.bold = (span.bold or bold) or None
        run.italic = span.italic or None


def _append_table(document: _Document, block: TableBlock) -> None:
    rows = [block.header, *block.rows]
    column_count = max((len(row) for row in rows), default=0)
    if column_count == 0:
        return

    docx_table = document.add_table(rows=len(rows), cols=column_count)
    docx_table.style = "Table Grid"

    for row_index, row in enumerate(rows):
        for column_index in range(column_count):
            value = row[column_index] if column_index < len(row) else ""
            cell = docx_table.cell(row_index, column_index)
            if value:
                _add_runs(cell.paragraphs[0], value, bold=row_index == 0)


def export_guide_to_docx(text: str, *, keep_blank_cells: bool = False) -> bytes:
    """Return DOCX bytes with the headings, paragraphs and tables of ``text``."""

    document = Document()
    _remove_placeholder_paragraph(document)

    for block in scan_blocks(text, keep_blank_cells=keep_blank_cells):
        if isinstance(block, HeadingBlock):
            document.add_heading(_xml_safe(block.text), level=block.level)
        elif isinstance(block, TableBlock):
            _append_table(document, block)
        elif isinstance(block, ParagraphBlock):
            _add_runs(document.add_paragraph(), block.text.rstrip("\r\n"))

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def guide_filename(text: str, fallback: str = "coaching_guide") -> str:
    """Pick a filesystem-safe DOCX name from the first top-level heading."""

    for block in scan_blocks(text):
        if isinstance(block, HeadingBlock) and block.level == 1 and block.text:
            stem = block.text
            break
    else:
        stem = fallback
    sanitized = re.sub(r"[^0-9A-Za-z_-]+", "_", stem).strip("._")
    return f"{sanitized or fallback}.docx"


__all__ = ["DOCX_MEDIA_TYPE", "export_guide_to_docx", "guide_filename"]
