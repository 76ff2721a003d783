from __future__ import annotations

import pytest
from jsdoc_parts.span import Span, utf8_len


def test_empty_span() -> None:
    span = Span.empty(12)
    assert span == Span(12, 12)
    assert span.is_empty
    assert span.size == 0


def test_covering_counts_utf8_bytes() -> None:
    assert Span.covering("abc") == Span(0, 3)
    assert Span.covering("変数", start=4) == Span(4, 10)
    assert utf8_len("@かいんど") == 13


@pytest.mark.parametrize(
    "source, span, expected",
    [
        ("hello world", Span(6, 11), "world"),
        ("hello", Span(0, 0), ""),
        ("/** 説明 */", Span(4, 10), "説明"),
    ],
)
def test_source_text(source: str, span: Span, expected: str) -> None:
    assert span.source_text(source) == expected


def test_spans_are_hashable_values() -> None:
    assert {Span(0, 1), Span(0, 1), Span(1, 2)} == {Span(0, 1), Span(1, 2)}
    assert str(Span(3, 8)) == "[3, 8)"
