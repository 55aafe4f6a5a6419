"""Batch processing pipeline."""

from typing import TextIO

from loguru import logger

from beesolver.core import Config, Puzzle
from beesolver.output import (
    create_report_dir,
    generate_summary_report,
    print_results,
    write_results,
)
from beesolver.processing.data_models import ScanResult
from beesolver.processing.scanner import solve


def write_reports(config: Config, puzzle: Puzzle, result: ScanResult) -> None:
    """Generate the summary report if a report directory is configured."""
    if not config.reports:
        return
    report_dir = create_report_dir(config.reports)
    generate_summary_report(result, puzzle, config, report_dir)


def run_pipeline(config: Config, stream: TextIO | None = None) -> ScanResult:
    """Solve the configured puzzle and emit the found words.

    Words go to `config.output` when set, otherwise to `stream` (stdout by
    default).

    Args:
        config: Configuration object with letters set
        stream: Stream for printed results

    Raises:
        ConfigurationError: If no letters are configured
        SourceUnavailable: If the dictionary cannot be read
        SinkUnavailable: If results or reports cannot be written
    """
    puzzle = config.build_puzzle()
    result = solve(config, puzzle)

    if config.output:
        write_results(result.words, config.output)
    else:
        print_results(result.words, stream)

    write_reports(config, puzzle, result)

    if config.verbose:
        logger.info(f"✓ {result.words_found} words found")
    return result
