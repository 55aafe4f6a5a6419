"""Writing accepted words to a file or stream."""

from collections.abc import Sequence
import sys
from typing import TextIO

from loguru import logger

from beesolver.core.exceptions import SinkUnavailable
from beesolver.utils import expand_file_path, write_text_file


def _write_words(words: Sequence[str], f: TextIO) -> None:
    for word in words:
        f.write(word + "\n")


def write_results(words: Sequence[str], output_path: str) -> str:
    """Write words to a file, one per line, overwriting it if it exists.

    Returns:
        The path written

    Raises:
        SinkUnavailable: If the file cannot be written
    """
    path = expand_file_path(output_path) or output_path
    write_text_file(path, lambda f: _write_words(words, f), "found words")

    logger.info(f"  Wrote {len(words)} words to: {path}")
    return path


def print_results(words: Sequence[str], stream: TextIO | None = None) -> None:
    """Print words to a stream (stdout by default), one per line.

    Raises:
        SinkUnavailable: If the stream cannot be written
    """
    out = stream if stream is not None else sys.stdout
    try:
        _write_words(words, out)
        out.flush()
    except OSError as e:
        logger.error(f"✗ Error writing to stdout: {e}")
        raise SinkUnavailable(f"Could not print results: {e}") from e
