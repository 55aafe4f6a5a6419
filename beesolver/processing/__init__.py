"""Dictionary scanning for BeeSolver."""

from beesolver.processing.data_models import ScanResult
from beesolver.processing.scanner import scan_words, solve
from beesolver.processing.pipeline import run_pipeline, write_reports

__all__ = ["ScanResult", "run_pipeline", "scan_words", "solve", "write_reports"]
