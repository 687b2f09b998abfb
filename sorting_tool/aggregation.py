"""Frequency counting over a parsed dataset."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List


@dataclass(frozen=True)
class FrequencyEntry:
    value: Any
    count: int

    def percentage(self, total: int) -> int:
        """Share of ``total`` in whole percent, truncated."""
        return self.count * 100 // total


def count_values(values: Iterable[Any]) -> Dict[Any, int]:
    """Return a frequency dictionary of values from an iterable."""
    return dict(Counter(values))


def frequency_entries(values: Iterable[Any]) -> List[FrequencyEntry]:
    return [
        FrequencyEntry(value, count) for value, count in count_values(values).items()
    ]


def sort_entries(
    entries: Iterable[FrequencyEntry],
    key: Callable[[Any], Any] = lambda value: value,
) -> List[FrequencyEntry]:
    """Order entries by ascending count, then by ascending value.

    Args:
        entries: Entries with distinct values
        key: Sort key applied to each value for the tie-break

    Returns:
        New list in report order
    """
    return sorted(entries, key=lambda entry: (entry.count, key(entry.value)))
