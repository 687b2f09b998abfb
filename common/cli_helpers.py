"""Shared CLI utilities for logging setup and report I/O."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from common.exceptions import FileOperationError
from common.file_helpers import write_text_atomic

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def setup_logging(level: str) -> None:
    """Configure logging so diagnostics share standard output with the report.

    Args:
        level: Logging level (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
    )


def read_input(file_path: Optional[Path] = None) -> str:
    """Read the whole input from a file, or from stdin when no file is given.

    Args:
        file_path: Path to a UTF-8 text file, or None for stdin

    Returns:
        Content as string

    Raises:
        FileOperationError: If the file or stdin cannot be read or decoded
    """
    try:
        if file_path is None:
            return sys.stdin.read()
        return Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise FileOperationError(str(ex)) from ex


def write_output(text: str, file_path: Optional[Path] = None) -> None:
    """Write the composed report to stdout or replace the file's content.

    Args:
        text: Complete report
        file_path: Target file, or None for stdout

    Raises:
        FileOperationError: If the target cannot be written
    """
    if file_path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    try:
        write_text_atomic(Path(file_path), text)
    except OSError as ex:
        raise FileOperationError(str(ex)) from ex
