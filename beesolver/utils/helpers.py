"""File helpers shared by the result sink and the reports."""

import os
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger

from beesolver.core.exceptions import SinkUnavailable


def expand_file_path(filepath: str | None) -> str | None:
    """Expand ~ in a user-supplied path; None or empty stays None."""
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def ensure_directory_exists(dir_path: str | Path) -> None:
    """Create `dir_path` and its parents unless it already exists.

    Raises:
        SinkUnavailable: If the directory cannot be created (a path component
            is a regular file, permission is denied, ...)
    """
    try:
        os.makedirs(dir_path, exist_ok=True)
    except OSError as e:
        logger.error(f"✗ Cannot create directory {dir_path}: {e.strerror or e}")
        logger.error("  Choose another location or check its permissions")
        raise SinkUnavailable(f"Cannot create directory {dir_path}: {e}") from e


def write_text_file(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    description: str,
) -> None:
    """Replace the contents of a UTF-8 text file.

    The parent directory is created when missing and an existing file is
    truncated. `description` names the content in error messages, e.g.
    "found words" or "summary report".

    Raises:
        SinkUnavailable: If the file cannot be created or written
    """
    parent_dir = os.path.dirname(str(file_path)) or "."
    ensure_directory_exists(parent_dir)

    try:
        with open(file_path, "w", encoding="utf-8") as f:
            content_writer(f)
    except OSError as e:
        logger.error(f"✗ Cannot write {description} to {file_path}: {e.strerror or e}")
        logger.error("  Choose another output path or check its permissions")
        raise SinkUnavailable(f"Cannot write {description} to {file_path}: {e}") from e
