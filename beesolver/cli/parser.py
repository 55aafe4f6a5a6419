"""Command-line interface for BeeSolver."""

import argparse

from beesolver.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="beesolver",
        description="Find dictionary words for a spelling bee letter puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive session (prompts for dictionary, letters and output)
  %(prog)s

  # Middle letter first, print answers to stdout
  %(prog)s --letters NABLOTY --dictionary words.txt

  # Explicit middle letter, save answers to a file
  %(prog)s --letters ABLNOTY --middle N -o answers.txt -v

  # Use the english-words list instead of a dictionary file
  %(prog)s --letters NABLOTY --builtin-dictionary

  # Using JSON config
  %(prog)s --config config.json

A word is accepted when it is at least --min-word-length letters long,
contains the middle letter, and uses only the given letters.

Example config.json:
{
  "dictionary": "dictionary.txt",
  "letters": "NABLOTY",
  "case_mode": "insensitive",
  "min_word_length": 4,
  "output": "answers.txt",
  "reports": "./reports",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Dictionary
    parser.add_argument(
        "--dictionary",
        type=str,
        default=Constants.DEFAULT_DICTIONARY,
        help=f"Dictionary file, one word per line (default: {Constants.DEFAULT_DICTIONARY})",
    )
    parser.add_argument(
        "--builtin-dictionary",
        action="store_true",
        help="Use the english-words word list instead of a dictionary file",
    )

    # Puzzle
    parser.add_argument(
        "-l",
        "--letters",
        type=str,
        help="Hive letters, middle letter first (omit for an interactive session)",
    )
    parser.add_argument(
        "-m",
        "--middle",
        type=str,
        help="Middle letter, if it is not the first of --letters",
    )
    parser.add_argument(
        "--case-mode",
        type=str,
        choices=[Constants.CASE_INSENSITIVE, Constants.CASE_NORMALIZE, Constants.CASE_EXACT],
        default=Constants.CASE_INSENSITIVE,
        help="insensitive: compare ignoring case; normalize: upper-case dictionary words "
        "when loading; exact: compare characters as they are",
    )
    parser.add_argument(
        "--min-word-length",
        type=int,
        default=Constants.MIN_WORD_LENGTH,
        help=f"Minimum word length (default: {Constants.MIN_WORD_LENGTH})",
    )

    # Output
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output file for found words (default: print to stdout)",
    )
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to write a summary report (creates timestamped subdirectories)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write log messages to this file (overwritten on each run)",
    )

    # Flags
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Prompt for missing input"
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
