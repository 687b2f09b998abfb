"""Data kinds: how each kind of token is parsed, compared and rendered.

A run works on exactly one kind. Everything kind-specific lives in a
``KindStrategy`` bundle looked up from the ``DataKind`` tag, so the engine and
the report code never branch on the kind themselves.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, List

from common.exceptions import ArgumentError, TokenParseError

logger = logging.getLogger(__name__)

# Reused for unknown data types as well as unknown sorting types.
UNKNOWN_TYPE_MESSAGE = "No sorting type defined!"

LONG_PATTERN = re.compile(r"[-+]?[0-9]+")
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

# Line terminators: CRLF, CR, LF, NEL, LS, PS.
LINE_BREAK = re.compile(r"\r\n|[\n\r\x85\u2028\u2029]")


class DataKind(Enum):
    LONG = "long"
    WORD = "word"
    LINE = "line"

    @classmethod
    def from_name(cls, name: str) -> "DataKind":
        for kind in cls:
            if kind.value == name:
                return kind
        raise ArgumentError(UNKNOWN_TYPE_MESSAGE)


@dataclass(frozen=True)
class KindStrategy:
    """Parse, compare and format rules for one data kind."""

    name: str  # used in "Total {name}s: N"
    parse: Callable[[str], List[Any]]
    compare: Callable[[Any, Any], int]
    natural_template: str
    count_template: str

    @property
    def sort_key(self) -> Callable[[Any], Any]:
        """Key function for ``sorted`` built from ``compare``."""
        return cmp_to_key(self.compare)

    def format_natural(self, value: Any) -> str:
        return self.natural_template.format(value=value)

    def format_count(self, value: Any, count: int, percentage: int) -> str:
        return self.count_template.format(
            value=value, count=count, percentage=percentage
        )


def parse_long(token: str) -> int:
    """Parse a token already known to match ``LONG_PATTERN`` as a 64-bit int."""
    value = int(token)
    if value < LONG_MIN or value > LONG_MAX:
        raise TokenParseError(f'For input string: "{token}"')
    return value


def parse_longs(text: str) -> List[int]:
    """Split on whitespace and keep the tokens that are signed integers.

    Anything else is reported and dropped. A token that looks like an integer
    but does not fit in 64 bits aborts parsing with ``TokenParseError``.
    """
    values: List[int] = []
    for token in text.split():
        if LONG_PATTERN.fullmatch(token):
            values.append(parse_long(token))
        else:
            logger.warning(f'"{token}" is not a long. It will be skipped.')
    return values


def parse_words(text: str) -> List[str]:
    return text.split()


def parse_lines(text: str) -> List[str]:
    """Split on line boundaries; empty lines are kept, no phantom last line.

    Other control characters such as form feed stay inside their line.
    """
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def compare_ordered(a: Any, b: Any) -> int:
    """Three-way comparison: negative, zero or positive.

    Python compares ints numerically and strings by code point, which is the
    order wanted for every kind.
    """
    return (a > b) - (a < b)


_STRATEGIES = {
    DataKind.LONG: KindStrategy(
        name="number",
        parse=parse_longs,
        compare=compare_ordered,
        natural_template="{value} ",
        count_template="{value}: {count} time(s), {percentage}%\n",
    ),
    DataKind.WORD: KindStrategy(
        name="word",
        parse=parse_words,
        compare=compare_ordered,
        natural_template="{value} ",
        count_template="{value}: {count} time(s), {percentage}%\n",
    ),
    DataKind.LINE: KindStrategy(
        name="line",
        parse=parse_lines,
        compare=compare_ordered,
        natural_template="\n{value}",
        count_template="{value}: {count} time(s), {percentage}%\n",
    ),
}


def strategy_for(kind: DataKind) -> KindStrategy:
    return _STRATEGIES[kind]


def parse_tokens(text: str, kind: DataKind) -> List[Any]:
    """Turn raw input text into the typed dataset for ``kind``."""
    values = strategy_for(kind).parse(text)
    logger.debug(f"Parsed {len(values)} {kind.value} token(s)")
    return values
