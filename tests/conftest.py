"""Shared pytest fixtures for sorting-tool tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def numbers_file(tmp_path: Path) -> Path:
    """Create a whitespace-separated file of integers with one bad token.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to the numbers file
    """
    file_path = tmp_path / "numbers.txt"
    file_path.write_text("4 1\n3   1\tx7\n-2\n")
    return file_path


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    """Create a sample text file of words for testing.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to the words file
    """
    file_path = tmp_path / "words.txt"
    file_path.write_text("a b a\nc b a\n")
    return file_path


@pytest.fixture
def lines_file(tmp_path: Path) -> Path:
    """Create a file with one entry per line, including an empty line.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to the lines file
    """
    file_path = tmp_path / "lines.txt"
    file_path.write_text("banana split\napple pie\n\ncherry\napple pie\n")
    return file_path
