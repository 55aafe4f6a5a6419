"""Interactive prompts for a solver session."""

import sys
from typing import Callable, TextIO

from loguru import logger

from beesolver.core import Config, Puzzle
from beesolver.data import dictionary_exists
from beesolver.output import print_results, write_results
from beesolver.processing import ScanResult, solve

InputFn = Callable[[str], str]


def prompt_dictionary_name(input_fn: InputFn, default: str) -> str:
    """Ask for a dictionary filename until an existing file or nothing is entered.

    Empty input selects `default`.
    """
    filename = input_fn(
        f'Enter the filename of the dictionary you want to use (hit enter for "{default}"): '
    ).strip()

    while filename and not dictionary_exists(filename):
        filename = input_fn(f'File "{filename}" does not exist. Please try again: ').strip()

    return filename or default


def prompt_letters(input_fn: InputFn) -> str:
    """Ask for the hive letters, middle letter first."""
    letters = ""
    while not letters:
        letters = input_fn("Enter each letter starting with the middle letter: ").strip()
    return letters


def prompt_yes_no(question: str, input_fn: InputFn) -> bool:
    """Return True if the answer starts with 'y'."""
    answer = input_fn(question).strip()
    return answer[:1].lower() == "y"


def prompt_output_filename(input_fn: InputFn) -> str:
    filename = ""
    while not filename:
        filename = input_fn("Enter the output filename: ").strip()
    return filename


def run_interactive(
    config: Config,
    input_fn: InputFn = input,
    stream: TextIO | None = None,
) -> tuple[Puzzle, ScanResult]:
    """Run a prompt-driven session.

    Prompts for the dictionary (unless the built-in list is configured) and
    letters, scans, then offers to save the words to a file or print them.

    Returns:
        The puzzle and its scan result

    Raises:
        ConfigurationError: If the letters do not form a puzzle
        SourceUnavailable: If the dictionary cannot be read
        SinkUnavailable: If the results cannot be saved
    """
    out = stream if stream is not None else sys.stdout

    dictionary = None
    if not config.builtin_dictionary:
        dictionary = prompt_dictionary_name(input_fn, config.dictionary)

    letters = config.letters or prompt_letters(input_fn)
    puzzle = config.build_puzzle(letters)
    logger.debug(f"Puzzle: {puzzle.display_letters()} (middle: {puzzle.middle})")

    result = solve(config, puzzle, dictionary=dictionary)

    if prompt_yes_no(
        f"{result.words_found} words found! Would you like to save them to a file? (y/n): ",
        input_fn,
    ):
        write_results(result.words, prompt_output_filename(input_fn))
    elif prompt_yes_no("Would you like to print them out? (y/n): ", input_fn):
        print_results(result.words, out)
    else:
        out.write("Alright, goodbye!\n")

    out.write("Have a nice day!\n")
    return puzzle, result
