"""Summary report generation."""

from datetime import datetime
from pathlib import Path
from typing import TextIO

from loguru import logger

from beesolver.core import Config, Puzzle
from beesolver.processing.data_models import ScanResult
from beesolver.utils import Constants, ensure_directory_exists, write_text_file


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.2f}s"


def write_report_header(f: TextIO, title: str) -> None:
    """Write a standard report header."""
    f.write("=" * Constants.REPORT_WIDTH + "\n")
    f.write(f"{title}\n")
    f.write("=" * Constants.REPORT_WIDTH + "\n")
    f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
    f.write("\n")


def write_subsection_header(f: TextIO, title: str) -> None:
    f.write(f"{title}\n")
    f.write("-" * Constants.REPORT_WIDTH + "\n")


def create_report_dir(base_dir: str, now: datetime | None = None) -> Path:
    """Create a timestamped report directory under `base_dir`."""
    stamp = (now or datetime.now()).strftime(Constants.REPORT_DIR_TIMESTAMP)
    report_dir = Path(base_dir).expanduser() / f"beesolver_{stamp}"
    ensure_directory_exists(report_dir)
    return report_dir


def generate_summary_report(
    result: ScanResult, puzzle: Puzzle, config: Config, report_dir: Path
) -> Path:
    """Write summary.txt describing a scan.

    Raises:
        SinkUnavailable: If the report cannot be written
    """
    filepath = report_dir / Constants.SUMMARY_REPORT_NAME
    source = "english-words (built-in)" if config.builtin_dictionary else config.dictionary

    def write_summary_content(f):
        write_report_header(f, "SPELLING BEE SUMMARY")

        write_subsection_header(f, "PUZZLE")
        f.write(f"Letters:                            {puzzle.display_letters()}\n")
        f.write(f"Middle letter:                      {puzzle.middle}\n")
        f.write(f"Dictionary:                         {source}\n")
        f.write(f"Case mode:                          {config.case_mode}\n")
        f.write(f"Minimum word length:                {config.min_word_length}\n\n")

        write_subsection_header(f, "SCAN STATISTICS")
        f.write(f"Words scanned:                      {result.words_scanned:,}\n")
        f.write(f"Too short:                          {result.rejected_short:,}\n")
        f.write(f"Missing middle letter:              {result.rejected_missing_middle:,}\n")
        f.write(f"Letters outside the hive:           {result.rejected_foreign_letters:,}\n")
        f.write(f"Words found:                        {result.words_found:,}\n")
        f.write(f"Scan time:                          {format_time(result.elapsed_time)}\n")

    write_text_file(filepath, write_summary_content, "summary report")

    logger.info(f"  Wrote summary report to: {filepath}")
    return filepath
