"""Run configuration and the token-pair argument scanner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from common.exceptions import ArgumentError
from sorting_tool.kinds import UNKNOWN_TYPE_MESSAGE, DataKind

logger = logging.getLogger(__name__)


class SortMode(Enum):
    NATURAL = "natural"
    BY_COUNT = "byCount"

    @classmethod
    def from_name(cls, name: str) -> "SortMode":
        for mode in cls:
            if mode.value == name:
                return mode
        raise ArgumentError(UNKNOWN_TYPE_MESSAGE)


@dataclass(frozen=True)
class SortConfig:
    data_kind: DataKind = DataKind.WORD
    sort_mode: SortMode = SortMode.NATURAL
    input_file: Optional[Path] = None
    output_file: Optional[Path] = None


# Lowercased flag name -> (config field, message when the value is missing)
FLAGS: Dict[str, Tuple[str, str]] = {
    "datatype": ("data_kind", "No data type defined!"),
    "sortingtype": ("sort_mode", "No sorting type defined!"),
    "inputfile": ("input_file", "No file name defined!"),
    "outputfile": ("output_file", "No file name defined!"),
}


def _is_flag(token: str) -> bool:
    return token.startswith("-") and len(token) > 1


def parse_arguments(tokens: Sequence[str]) -> SortConfig:
    """Build a ``SortConfig`` from raw ``-flag value`` tokens.

    Flag names are case-insensitive and may come in any order; later
    occurrences win. Unknown flags are reported and skipped along with their
    value. Tokens that are neither a flag nor a flag's value are ignored.

    Raises:
        ArgumentError: A known flag has no value, or a type name is unknown.
    """
    raw: Dict[str, str] = {}
    args: List[str] = list(tokens)
    i = 0
    while i < len(args):
        token = args[i]
        if not _is_flag(token):
            logger.debug(f"Ignoring stray argument {token!r}")
            i += 1
            continue

        name = token[1:]
        has_value = i + 1 < len(args) and not _is_flag(args[i + 1])
        flag = FLAGS.get(name.lower())
        if flag is None:
            logger.warning(f'"{name}" is not a valid parameter. It will be skipped.')
        else:
            field, missing_message = flag
            if not has_value:
                raise ArgumentError(missing_message)
            raw[field] = args[i + 1]
        i += 2 if has_value else 1

    config = SortConfig(
        data_kind=DataKind.from_name(raw.get("data_kind", DataKind.WORD.value)),
        sort_mode=SortMode.from_name(raw.get("sort_mode", SortMode.NATURAL.value)),
        input_file=Path(raw["input_file"]) if "input_file" in raw else None,
        output_file=Path(raw["output_file"]) if "output_file" in raw else None,
    )
    logger.debug(f"Configuration: {config}")
    return config
