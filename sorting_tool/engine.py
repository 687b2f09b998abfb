"""Sorting engine: drives one run from raw input to the written report.

A run moves through ``RunState`` in one direction only::

    INIT -> PARSED -> NATURALLY_SORTED | AGGREGATED -> FORMATTED -> WRITTEN -> DONE

Any parse or I/O failure puts the run in ``FAILED`` and re-raises; nothing is
written in that case.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Optional

from common.cli_helpers import read_input, write_output
from common.exceptions import SortingToolError
from sorting_tool.aggregation import FrequencyEntry, frequency_entries, sort_entries
from sorting_tool.config import SortConfig, SortMode
from sorting_tool.kinds import DataKind, KindStrategy, parse_tokens, strategy_for
from sorting_tool.report import format_counts, format_natural

logger = logging.getLogger(__name__)


class RunState(Enum):
    INIT = "init"
    PARSED = "parsed"
    NATURALLY_SORTED = "naturally_sorted"
    AGGREGATED = "aggregated"
    FORMATTED = "formatted"
    WRITTEN = "written"
    DONE = "done"
    FAILED = "failed"


_NEXT_STATES = {
    RunState.INIT: {RunState.PARSED},
    RunState.PARSED: {RunState.NATURALLY_SORTED, RunState.AGGREGATED},
    RunState.NATURALLY_SORTED: {RunState.FORMATTED},
    RunState.AGGREGATED: {RunState.FORMATTED},
    RunState.FORMATTED: {RunState.WRITTEN},
    RunState.WRITTEN: {RunState.DONE},
    RunState.DONE: set(),
    RunState.FAILED: set(),
}


class SortingEngine:
    """One sorting run over a single dataset."""

    def __init__(self, config: SortConfig) -> None:
        self.config = config
        self.strategy: KindStrategy = strategy_for(config.data_kind)
        self.state = RunState.INIT
        self.dataset: List[Any] = []
        self.entries: List[FrequencyEntry] = []
        self.report: Optional[str] = None

    def _advance(self, state: RunState) -> None:
        if state not in _NEXT_STATES[self.state]:
            raise RuntimeError(
                f"Cannot move from {self.state.value} to {state.value}"
            )
        logger.debug(f"Run state: {self.state.value} -> {state.value}")
        self.state = state

    def parse(self, text: str) -> List[Any]:
        self.dataset = parse_tokens(text, self.config.data_kind)
        self._advance(RunState.PARSED)
        return self.dataset

    def sort(self) -> None:
        if self.config.sort_mode is SortMode.BY_COUNT:
            self.entries = sort_entries(
                frequency_entries(self.dataset), key=self.strategy.sort_key
            )
            logger.debug(f"Aggregated {len(self.entries)} distinct value(s)")
            self._advance(RunState.AGGREGATED)
        else:
            self.dataset.sort(key=self.strategy.sort_key)
            self._advance(RunState.NATURALLY_SORTED)

    def format(self) -> str:
        if self.state is RunState.AGGREGATED:
            report = format_counts(self.strategy, self.entries, len(self.dataset))
        else:
            report = format_natural(self.strategy, self.dataset)
        self._advance(RunState.FORMATTED)
        self.report = report
        return report

    def write(self) -> None:
        if self.report is None:
            raise RuntimeError("Nothing to write before the report is formatted")
        if self.config.output_file is not None:
            logger.info(f"Writing report to {self.config.output_file}")
        write_output(self.report, self.config.output_file)
        self._advance(RunState.WRITTEN)

    def run(self, text: Optional[str] = None) -> str:
        """Execute the whole run and return the report that was written.

        Args:
            text: Input to use instead of reading ``config.input_file``/stdin

        Raises:
            SortingToolError: On unreadable input, integer overflow, or an
                unwritable output target
        """
        try:
            if text is None:
                text = read_input(self.config.input_file)
            self.parse(text)
            self.sort()
            report = self.format()
            self.write()
        except SortingToolError:
            self.state = RunState.FAILED
            raise
        self._advance(RunState.DONE)
        return report


def sort_text(text: str, kind: DataKind, mode: SortMode) -> str:
    """Render the report for ``text`` without touching any file or stream."""
    engine = SortingEngine(SortConfig(data_kind=kind, sort_mode=mode))
    engine.parse(text)
    engine.sort()
    return engine.format()
