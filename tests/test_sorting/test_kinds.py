"""Tests for sorting_tool.kinds module."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from common.exceptions import ArgumentError, TokenParseError
from sorting_tool.kinds import (
    LONG_MAX,
    LONG_MIN,
    DataKind,
    KindStrategy,
    compare_ordered,
    parse_lines,
    parse_longs,
    parse_tokens,
    parse_words,
    strategy_for,
)


def test_parse_longs_basic():
    """Test parsing whitespace-separated integers."""
    assert parse_longs("4 1\n3\t1") == [4, 1, 3, 1]


def test_parse_longs_signs():
    """Test that explicit signs are accepted."""
    assert parse_longs("+5 -7 0 -0") == [5, -7, 0, 0]


def test_parse_longs_skips_invalid_tokens(caplog):
    """Test that non-integer tokens are reported and dropped."""
    with caplog.at_level(logging.WARNING):
        values = parse_longs("1 abc 2")

    assert values == [1, 2]
    assert '"abc" is not a long. It will be skipped.' in caplog.messages


@pytest.mark.parametrize("token", ["1.5", "12a", "--3", "+", "0x10", "٣"])
def test_parse_longs_rejects_non_integers(token: str, caplog):
    """Test tokens that do not match the signed integer pattern."""
    assert parse_longs(token) == []
    assert f'"{token}" is not a long. It will be skipped.' in caplog.messages


def test_parse_longs_range_limits():
    """Test the 64-bit boundaries are accepted."""
    text = f"{LONG_MAX} {LONG_MIN}"

    assert parse_longs(text) == [9223372036854775807, -9223372036854775808]


@pytest.mark.parametrize("token", ["9223372036854775808", "-9223372036854775809"])
def test_parse_longs_overflow_aborts(token: str):
    """Test that integers outside 64 bits raise instead of being skipped."""
    with pytest.raises(TokenParseError) as exc_info:
        parse_longs(f"1 {token} 2")

    assert str(exc_info.value) == f'For input string: "{token}"'


def test_parse_words_no_validation():
    """Test that any whitespace-separated token is kept as-is."""
    assert parse_words("  hello, World!\n 42  ") == ["hello,", "World!", "42"]


def test_parse_words_empty():
    """Test parsing empty and whitespace-only input."""
    assert parse_words("") == []
    assert parse_words(" \n\t ") == []


def test_parse_lines_keeps_empty_lines():
    """Test that blank lines are kept but no phantom last line is added."""
    assert parse_lines("a\n\nb\n") == ["a", "", "b"]


def test_parse_lines_without_trailing_newline():
    """Test input whose last line has no terminator."""
    assert parse_lines("banana\napple\ncherry") == ["banana", "apple", "cherry"]


def test_parse_lines_windows_endings():
    """Test CRLF line terminators."""
    assert parse_lines("one\r\ntwo\r\n") == ["one", "two"]


def test_parse_lines_empty():
    """Test that empty input yields no lines."""
    assert parse_lines("") == []


def test_compare_ordered():
    """Test three-way comparison for numbers and strings."""
    assert compare_ordered(1, 2) < 0
    assert compare_ordered(2, 1) > 0
    assert compare_ordered(3, 3) == 0
    assert compare_ordered("B", "a") < 0
    assert compare_ordered("apple", "apple") == 0


def test_long_sort_is_numeric():
    """Test integers sort by value, not by their text."""
    strategy = strategy_for(DataKind.LONG)

    assert sorted([10, 9, -2, 100], key=strategy.sort_key) == [-2, 9, 10, 100]


def test_word_sort_is_ordinal():
    """Test strings sort by code point, upper case first."""
    strategy = strategy_for(DataKind.WORD)

    assert sorted(["b", "B", "a", "é", "Z"], key=strategy.sort_key) == [
        "B",
        "Z",
        "a",
        "b",
        "é",
    ]


@pytest.mark.parametrize(
    "kind,name",
    [(DataKind.LONG, "number"), (DataKind.WORD, "word"), (DataKind.LINE, "line")],
)
def test_strategy_names(kind: DataKind, name: str):
    """Test the name used in report headers."""
    assert strategy_for(kind).name == name


def test_natural_templates():
    """Test how each kind renders one element in natural mode."""
    assert strategy_for(DataKind.LONG).format_natural(7) == "7 "
    assert strategy_for(DataKind.WORD).format_natural("hi") == "hi "
    assert strategy_for(DataKind.LINE).format_natural("a line") == "\na line"


def test_count_template_keeps_braces():
    """Test that values containing braces are not treated as placeholders."""
    row = strategy_for(DataKind.WORD).format_count("{x}", 2, 50)

    assert row == "{x}: 2 time(s), 50%\n"


def test_data_kind_from_name():
    """Test mapping CLI names to data kinds."""
    assert DataKind.from_name("long") is DataKind.LONG
    assert DataKind.from_name("word") is DataKind.WORD
    assert DataKind.from_name("line") is DataKind.LINE


@pytest.mark.parametrize("name", ["integer", "LONG", ""])
def test_data_kind_from_unknown_name(name: str):
    """Test that unknown data types reuse the sorting type message."""
    with pytest.raises(ArgumentError, match="No sorting type defined!"):
        DataKind.from_name(name)


def test_parse_tokens_dispatches_on_kind():
    """Test that the same text parses differently per kind."""
    text = "b a\na"

    assert parse_tokens(text, DataKind.WORD) == ["b", "a", "a"]
    assert parse_tokens(text, DataKind.LINE) == ["b a", "a"]


def test_parse_lines_keeps_control_characters():
    """Test that form feed, vertical tab and separators stay in their line."""
    assert parse_lines("a\x0cb\nc\x0bd\n\x1ce\n") == ["a\x0cb", "c\x0bd", "\x1ce"]


def test_parse_lines_unicode_terminators():
    """Test CR, NEL and the Unicode line and paragraph separators."""
    assert parse_lines("a\rb\x85c\u2028d\u2029e") == ["a", "b", "c", "d", "e"]


def test_parse_lines_trailing_empty_line():
    """Test that only the final terminator is dropped, not a blank line."""
    assert parse_lines("a\n\n") == ["a", ""]


def test_strategy_fields():
    """Test that a strategy bundle carries only the per-kind rules."""
    names = [f.name for f in dataclasses.fields(KindStrategy)]

    assert names == ["name", "parse", "compare", "natural_template", "count_template"]
