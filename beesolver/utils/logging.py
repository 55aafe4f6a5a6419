"""Logging configuration for BeeSolver using loguru.

Diagnostics always go to stderr; stdout is reserved for found words and the
interactive prompts.
"""

from pathlib import Path
import sys

from loguru import logger

CONSOLE_FORMAT = "<level>{message}</level>"
DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"


def log_level(verbose: bool = False, debug: bool = False) -> str:
    """Map the -v / -d flags to a loguru level name."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return "WARNING"


def setup_logger(
    verbose: bool = False, debug: bool = False, log_file: str | Path | None = None
) -> None:
    """Configure loguru for a BeeSolver run.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
        log_file: Also write messages to this file, replacing its contents.
            The file always receives timestamped lines and no colors.
    """
    logger.remove()
    level = log_level(verbose, debug)

    logger.add(
        sys.stderr,
        format=DEBUG_FORMAT if debug else CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            colorize=False,
            encoding="utf-8",
            mode="w",
        )
