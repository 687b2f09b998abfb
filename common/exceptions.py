"""Shared exception classes for sorting-tool."""

from __future__ import annotations


class SortingToolError(Exception):
    """Base exception for all errors that abort a sorting run."""

    pass


class ArgumentError(SortingToolError, ValueError):
    """Missing or invalid command-line value."""

    pass


class TokenParseError(SortingToolError, ValueError):
    """A token looked like a number but could not be represented."""

    pass


class FileOperationError(SortingToolError):
    """Error while reading input or writing the report."""

    pass
