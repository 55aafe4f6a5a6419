"""BeeSolver - find dictionary words for a spelling bee letter puzzle."""

from beesolver.core import (
    BeeSolverError,
    Config,
    ConfigurationError,
    Puzzle,
    SinkUnavailable,
    SourceUnavailable,
    is_valid_word,
    load_config,
)
from beesolver.processing import ScanResult, run_pipeline, scan_words, solve
from beesolver.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "BeeSolverError",
    "Config",
    "ConfigurationError",
    "Puzzle",
    "ScanResult",
    "SinkUnavailable",
    "SourceUnavailable",
    "is_valid_word",
    "load_config",
    "run_pipeline",
    "scan_words",
    "setup_logger",
    "solve",
]
