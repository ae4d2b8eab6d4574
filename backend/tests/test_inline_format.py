"""Unit tests for bold and italic emphasis."""

from __future__ import annotations

from coaching_guide.inline_format import InlineSpan, apply_emphasis, iter_emphasis_spans


def test_bold_is_resolved_before_italic() -> None:
    result = apply_emphasis("**bold *and italic* text**")

    assert result == "<strong>bold <em>and italic</em> text</strong>"


def test_sequential_spans() -> None:
    result = apply_emphasis("**one** and *two* and **three**")

    assert result == "<strong>one</strong> and <em>two</em> and <strong>three</strong>"


def test_unmatched_marker_stays_literal() -> None:
    assert apply_emphasis("5 * 3 equals 15") == "5 * 3 equals 15"
    assert apply_emphasis("*a* and * b") == "<em>a</em> and * b"


def test_spans_do_not_cross_lines() -> None:
    assert apply_emphasis("*first\nsecond*") == "*first\nsecond*"


def test_iter_emphasis_spans_marks_runs() -> None:
    spans = list(iter_emphasis_spans("Say **bold *and italic* text** then *end*"))

    assert spans == [
        InlineSpan("Say "),
        InlineSpan("bold ", bold=True),
        InlineSpan("and italic", bold=True, italic=True),
        InlineSpan(" text", bold=True),
        InlineSpan(" then "),
        InlineSpan("end", italic=True),
    ]


def test_iter_emphasis_spans_plain_text() -> None:
    assert list(iter_emphasis_spans("no markers")) == [InlineSpan("no markers")]
