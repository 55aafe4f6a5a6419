"""Dictionary loading."""

import os
from collections.abc import Iterator
from typing import TextIO

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger

from beesolver.core.exceptions import SourceUnavailable
from beesolver.utils import Constants, expand_file_path

DEFAULT_DICTIONARY = Constants.DEFAULT_DICTIONARY


def dictionary_exists(filepath: str) -> bool:
    """Check whether a dictionary file exists and can be read."""
    path = expand_file_path(filepath)
    if not path:
        return False
    return os.path.isfile(path) and os.access(path, os.R_OK)


def _open_dictionary(filepath: str) -> TextIO:
    """Open a dictionary file, translating failures into SourceUnavailable."""
    try:
        return open(filepath, "r", encoding="utf-8")
    except FileNotFoundError as e:
        logger.error(f"✗ Dictionary file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise SourceUnavailable(f"Dictionary file not found: {filepath}") from e
    except PermissionError as e:
        logger.error(f"✗ Permission denied reading dictionary: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise SourceUnavailable(f"Permission denied reading dictionary: {filepath}") from e
    except OSError as e:
        logger.error(f"✗ Could not open dictionary {filepath}: {e}")
        raise SourceUnavailable(f"Could not open dictionary {filepath}: {e}") from e


def _read_lines(filepath: str, normalize: bool) -> Iterator[str]:
    with _open_dictionary(filepath) as f:
        try:
            for line in f:
                word = line.strip()
                if not word:
                    continue
                yield word.upper() if normalize else word
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading {filepath}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise SourceUnavailable(f"Encoding error reading {filepath}: {e}") from e
        except OSError as e:
            logger.error(f"✗ Error reading dictionary {filepath}: {e}")
            raise SourceUnavailable(f"Error reading dictionary {filepath}: {e}") from e


def iter_dictionary_words(filepath: str, normalize: bool = False) -> Iterator[str]:
    """Lazily yield the words of a dictionary file in file order.

    The file is checked immediately so a missing or unreadable dictionary is
    reported before scanning starts. It is reopened when iteration begins and
    closed when the iterator is exhausted or closed; an iterator that is never
    started holds no open file. Lines are trimmed and blank lines skipped.

    Args:
        filepath: Path to a text file with one word per line
        normalize: Upper-case every word as it is read

    Returns:
        Iterator over the dictionary words

    Raises:
        SourceUnavailable: If the file cannot be opened or read
    """
    path = expand_file_path(filepath) or filepath
    if os.path.isdir(path):
        logger.error(f"✗ Dictionary path is a directory: {path}")
        raise SourceUnavailable(f"Dictionary path is a directory: {path}")

    with _open_dictionary(path):
        logger.debug(f"Dictionary {path} is readable")
    return _read_lines(path, normalize)


def load_builtin_words(normalize: bool = False) -> list[str]:
    """Load the english-words word list as a dictionary.

    Returns:
        Sorted list of words, upper-cased when `normalize` is true

    Raises:
        SourceUnavailable: If the english-words package fails to load
    """
    try:
        words: set[str] = get_english_words_set(list(Constants.BUILTIN_WORD_LISTS), lower=False)
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise SourceUnavailable("Failed to load built-in dictionary") from e

    logger.info(f"  Loaded {len(words)} words from english-words")
    ordered = sorted(words)
    # Case variants remain separate entries
    return [w.upper() for w in ordered] if normalize else ordered
