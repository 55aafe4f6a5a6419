"""Constants shared across BeeSolver."""


class Constants:
    """Application-wide constants."""

    # Puzzle rules
    MIN_WORD_LENGTH = 4

    # Dictionary sources
    DEFAULT_DICTIONARY = "dictionary.txt"
    BUILTIN_WORD_LISTS = ("web2",)

    # Case handling modes
    CASE_INSENSITIVE = "insensitive"
    CASE_NORMALIZE = "normalize"
    CASE_EXACT = "exact"

    # Reports
    SUMMARY_REPORT_NAME = "summary.txt"
    REPORT_DIR_TIMESTAMP = "%Y-%m-%d_%H-%M-%S"
    REPORT_WIDTH = 70
