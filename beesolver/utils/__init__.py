"""Utility functions for BeeSolver."""

from beesolver.utils.constants import Constants
from beesolver.utils.helpers import ensure_directory_exists, expand_file_path, write_text_file
from beesolver.utils.logging import setup_logger

__all__ = [
    "Constants",
    "ensure_directory_exists",
    "expand_file_path",
    "setup_logger",
    "write_text_file",
]
