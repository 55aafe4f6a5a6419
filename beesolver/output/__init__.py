"""Result output for BeeSolver."""

from beesolver.output.reports import create_report_dir, generate_summary_report
from beesolver.output.sink import print_results, write_results

__all__ = [
    "create_report_dir",
    "generate_summary_report",
    "print_results",
    "write_results",
]
