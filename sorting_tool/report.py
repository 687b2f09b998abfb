"""Report rendering for the natural and by-count modes."""

from __future__ import annotations

from typing import Any, List, Sequence

from sorting_tool.aggregation import FrequencyEntry
from sorting_tool.kinds import KindStrategy


def format_header(strategy: KindStrategy, total: int) -> str:
    return f"Total {strategy.name}s: {total}\n"


def format_natural(strategy: KindStrategy, values: Sequence[Any]) -> str:
    """Render an already sorted dataset.

    Example (numbers ``1 1 3 4``)::

        Total numbers: 4
        Sorted data: 1 1 3 4
    """
    parts: List[str] = [format_header(strategy, len(values)), "Sorted data: "]
    parts.extend(strategy.format_natural(value) for value in values)
    parts.append("\n")
    return "".join(parts)


def format_counts(
    strategy: KindStrategy, entries: Sequence[FrequencyEntry], total: int
) -> str:
    """Render sorted frequency entries, one row per distinct value.

    ``total`` is the size of the dataset, not the number of entries. An empty
    dataset yields the header only.
    """
    parts: List[str] = [format_header(strategy, total)]
    if total == 0:
        return parts[0]
    for entry in entries:
        parts.append(
            strategy.format_count(entry.value, entry.count, entry.percentage(total))
        )
    return "".join(parts)
