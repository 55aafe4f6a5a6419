"""Command-line interface for BeeSolver."""

from beesolver.cli.parser import create_parser
from beesolver.cli.prompts import (
    prompt_dictionary_name,
    prompt_letters,
    prompt_yes_no,
    run_interactive,
)

__all__ = [
    "create_parser",
    "prompt_dictionary_name",
    "prompt_letters",
    "prompt_yes_no",
    "run_interactive",
]
