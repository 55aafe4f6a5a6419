"""Word validity rules for the spelling bee puzzle."""

from collections.abc import Iterable
from enum import Enum

from beesolver.utils.constants import Constants

MIN_WORD_LENGTH = Constants.MIN_WORD_LENGTH


class RejectionReason(Enum):
    """First rule a candidate word fails."""

    TOO_SHORT = "too_short"
    MISSING_MIDDLE = "missing_middle"
    FOREIGN_LETTER = "foreign_letter"


def _normalize(
    word: str, letters: Iterable[str], middle: str, case_mode: str
) -> tuple[str, frozenset[str], str]:
    """Bring word, letters and middle letter to a common case for comparison."""
    if case_mode == Constants.CASE_INSENSITIVE:
        return word.upper(), frozenset(c.upper() for c in letters), middle.upper()
    return word, frozenset(letters), middle


def rejection_reason(
    word: str,
    letters: Iterable[str],
    middle: str,
    min_length: int = MIN_WORD_LENGTH,
    case_mode: str = Constants.CASE_INSENSITIVE,
) -> RejectionReason | None:
    """Return the first rule `word` violates, or None if the word is accepted.

    Rules are checked in order: minimum length, presence of the middle letter,
    and membership of every character in the letter set.

    Args:
        word: Candidate word
        letters: Allowed letters
        middle: Required middle letter
        min_length: Minimum accepted word length
        case_mode: One of "insensitive", "normalize" or "exact"

    Returns:
        The violated rule, or None if all rules hold
    """
    if len(word) < min_length:
        return RejectionReason.TOO_SHORT

    word, letter_set, middle = _normalize(word, letters, middle, case_mode)

    if not middle or middle not in word:
        return RejectionReason.MISSING_MIDDLE
    if any(c not in letter_set for c in word):
        return RejectionReason.FOREIGN_LETTER
    return None


def is_valid_word(
    word: str,
    letters: Iterable[str],
    middle: str,
    min_length: int = MIN_WORD_LENGTH,
    case_mode: str = Constants.CASE_INSENSITIVE,
) -> bool:
    """Check whether a word is a valid answer for the puzzle."""
    return rejection_reason(word, letters, middle, min_length, case_mode) is None
