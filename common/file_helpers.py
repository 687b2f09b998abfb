"""Shared file operation utilities."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def write_text_atomic(target: Path, text: str, encoding: str = "utf-8") -> None:
    """Replace the whole content of ``target`` with ``text``.

    The text goes to a temporary file in the target's directory first and is
    then renamed over the target, so readers never see a half-written file.

    Args:
        target: File to create or overwrite
        text: Complete new content
        encoding: Text encoding used for the file

    Raises:
        OSError: If the directory or the target is not writable
    """
    target = Path(target)
    directory = target.parent
    directory.mkdir(parents=True, exist_ok=True)

    tmp = tempfile.NamedTemporaryFile(
        "w",
        encoding=encoding,
        newline="",
        delete=False,
        dir=directory,
        prefix=f".{target.name}.",
        suffix=".tmp",
    )
    try:
        with tmp:
            tmp.write(text)
        os.replace(tmp.name, target)
    except Exception:
        Path(tmp.name).unlink(missing_ok=True)
        raise
    logger.debug(f"Wrote {len(text)} characters to {target}")
