"""Unit tests for the word validity rules.

Each test has a single assertion and focuses on behavior.
"""

from beesolver.core import RejectionReason, is_valid_word, rejection_reason

LETTERS = frozenset("ABLNOTY")
MIDDLE = "N"


class TestIsValidWord:
    """Test is_valid_word behavior."""

    def test_accepts_word_using_only_hive_letters(self) -> None:
        """When word is long enough, has the middle letter and only hive letters, accepts it."""
        assert is_valid_word("baton", LETTERS, MIDDLE)

    def test_accepts_repeated_letters(self) -> None:
        """When word repeats hive letters, accepts it."""
        assert is_valid_word("balloon", LETTERS, MIDDLE)

    def test_rejects_word_shorter_than_minimum(self) -> None:
        """When word has fewer than four letters, rejects it even if letters match."""
        assert not is_valid_word("ant", LETTERS, MIDDLE)

    def test_accepts_word_of_exactly_minimum_length(self) -> None:
        """When word has exactly four letters, length rule passes."""
        assert is_valid_word("noon", LETTERS, MIDDLE)

    def test_rejects_word_without_middle_letter(self) -> None:
        """When word lacks the middle letter, rejects it."""
        assert not is_valid_word("tybalt", LETTERS, MIDDLE)

    def test_rejects_word_with_foreign_letters(self) -> None:
        """When word uses letters outside the hive, rejects it."""
        assert not is_valid_word("banner", LETTERS, MIDDLE)

    def test_empty_letter_set_accepts_nothing(self) -> None:
        """When letter set is empty, no word is accepted."""
        assert not is_valid_word("nnnn", frozenset(), MIDDLE)

    def test_insensitive_mode_ignores_case(self) -> None:
        """When case mode is insensitive, lower-case words match upper-case letters."""
        assert is_valid_word("Baton", LETTERS, "n", case_mode="insensitive")

    def test_exact_mode_compares_case(self) -> None:
        """When case mode is exact, lower-case words do not match upper-case letters."""
        assert not is_valid_word("baton", LETTERS, MIDDLE, case_mode="exact")

    def test_normalize_mode_compares_exactly(self) -> None:
        """When case mode is normalize, already upper-cased words match."""
        assert is_valid_word("BATON", LETTERS, MIDDLE, case_mode="normalize")

    def test_honors_custom_minimum_length(self) -> None:
        """When a larger minimum length is given, shorter words are rejected."""
        assert not is_valid_word("baton", LETTERS, MIDDLE, min_length=6)


class TestRejectionReason:
    """Test rejection_reason behavior."""

    def test_returns_none_for_accepted_word(self) -> None:
        """When word is accepted, returns None."""
        assert rejection_reason("baton", LETTERS, MIDDLE) is None

    def test_reports_too_short_first(self) -> None:
        """When word is short and has foreign letters, reports the length rule."""
        assert rejection_reason("xyz", LETTERS, MIDDLE) is RejectionReason.TOO_SHORT

    def test_reports_missing_middle(self) -> None:
        """When word lacks the middle letter, reports MISSING_MIDDLE."""
        assert rejection_reason("tybalt", LETTERS, MIDDLE) is RejectionReason.MISSING_MIDDLE

    def test_reports_foreign_letter(self) -> None:
        """When word has the middle letter but a foreign letter, reports FOREIGN_LETTER."""
        assert rejection_reason("nation", LETTERS, MIDDLE) is RejectionReason.FOREIGN_LETTER
