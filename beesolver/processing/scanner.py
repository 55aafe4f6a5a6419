"""Dictionary scan: apply the puzzle rules to every candidate word."""

from collections.abc import Iterable
import time
from typing import Any

from loguru import logger
from tqdm import tqdm

from beesolver.core import Config, Puzzle, RejectionReason, rejection_reason
from beesolver.data import iter_dictionary_words, load_builtin_words
from beesolver.processing.data_models import ScanResult
from beesolver.utils import Constants


def scan_words(
    words: Iterable[str],
    puzzle: Puzzle,
    min_length: int = Constants.MIN_WORD_LENGTH,
    case_mode: str = Constants.CASE_INSENSITIVE,
    show_progress: bool = False,
) -> ScanResult:
    """Filter candidate words against a puzzle in a single pass.

    Args:
        words: Candidate words in dictionary order
        puzzle: Letters and middle letter to match against
        min_length: Minimum accepted word length
        case_mode: How letter case is compared
        show_progress: Display a tqdm progress bar

    Returns:
        ScanResult with accepted words in dictionary order
    """
    start_time = time.time()
    result = ScanResult()

    words_iter: Any = (
        tqdm(words, desc="Scanning dictionary", unit="word") if show_progress else words
    )

    for word in words_iter:
        result.words_scanned += 1
        reason = rejection_reason(word, puzzle.letters, puzzle.middle, min_length, case_mode)
        if reason is None:
            result.words.append(word)
        elif reason is RejectionReason.TOO_SHORT:
            result.rejected_short += 1
        elif reason is RejectionReason.MISSING_MIDDLE:
            result.rejected_missing_middle += 1
        else:
            result.rejected_foreign_letters += 1

    result.elapsed_time = time.time() - start_time
    logger.debug(
        f"Scanned {result.words_scanned} words, accepted {result.words_found} "
        f"in {result.elapsed_time:.3f}s"
    )
    return result


def solve(config: Config, puzzle: Puzzle, dictionary: str | None = None) -> ScanResult:
    """Scan the configured dictionary for answers to the puzzle.

    Args:
        config: Configuration object
        puzzle: Puzzle to solve
        dictionary: Dictionary path overriding `config.dictionary`

    Raises:
        SourceUnavailable: If the dictionary cannot be read
    """
    normalize = config.case_mode == Constants.CASE_NORMALIZE

    words: Iterable[str]
    if config.builtin_dictionary:
        logger.info("Loading built-in english-words dictionary...")
        words = load_builtin_words(normalize=normalize)
    else:
        path = dictionary or config.dictionary
        logger.info(f"Scanning dictionary: {path}")
        words = iter_dictionary_words(path, normalize=normalize)

    logger.info(f"Letters: {puzzle.display_letters()} (middle: {puzzle.middle})")

    result = scan_words(
        words,
        puzzle,
        min_length=config.min_word_length,
        case_mode=config.case_mode,
        show_progress=config.progress,
    )
    logger.info(f"  Found {result.words_found} words out of {result.words_scanned}")
    return result
