"""Printable HTML shell that wraps a rendered guide body."""
from __future__ import annotations

from string import Template

DEFAULT_TITLE = "Coaching Guide"

STYLESHEET = """
body {
    font-family: "Helvetica Neue", Arial, sans-serif;
    color: #222;
    line-height: 1.6;
    max-width: 860px;
    margin: 0 auto;
    padding: 32px 24px;
}
h1 {
    font-size: 28px;
    color: #1f3a5f;
    border-bottom: 3px solid #1f3a5f;
    padding-bottom: 8px;
    margin-top: 0;
}
h2 {
    font-size: 22px;
    color: #1f3a5f;
    border-bottom: 1px solid #c9d3e0;
    padding-bottom: 4px;
    margin-top: 32px;
}
h3 {
    font-size: 18px;
    color: #34507a;
    margin-top: 24px;
}
p {
    margin: 12px 0;
    white-space: pre-line;
}
strong {
    color: #111;
}
em {
    color: #555;
}
table {
    width: 100%;
    border-collapse: collapse;
    margin: 16px 0;
    font-size: 14px;
}
th, td {
    border: 1px solid #c9d3e0;
    padding: 8px 10px;
    text-align: left;
    vertical-align: top;
}
th {
    background: #eef2f7;
    font-weight: 600;
}
tr:nth-child(even) td {
    background: #f8fafc;
}
.print-button {
    position: fixed;
    top: 16px;
    right: 16px;
    padding: 8px 16px;
    border: none;
    border-radius: 4px;
    background: #1f3a5f;
    color: #fff;
    cursor: pointer;
}
@media print {
    body {
        max-width: none;
        padding: 0;
        font-size: 12pt;
    }
    .print-button {
        display: none;
    }
    h1, h2, h3 {
        page-break-after: avoid;
    }
    table, tr {
        page-break-inside: avoid;
    }
    th {
        -webkit-print-color-adjust: exact;
        print-color-adjust: exact;
    }
}
"""

_DOCUMENT_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>$title</title>
<style>$stylesheet</style>
</head>
<body>
<button class="print-button" onclick="window.print()">Print as PDF</button>
$body
</body>
</html>
"""
)


def assemble_document(body: str, *, title: str = DEFAULT_TITLE) -> str:
    """Insert ``body`` unchanged into the document shell."""

    return _DOCUMENT_TEMPLATE.substitute(title=title, stylesheet=STYLESHEET, body=body)


__all__ = ["DEFAULT_TITLE", "STYLESHEET", "assemble_document"]
