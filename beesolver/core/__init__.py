"""Core puzzle logic for BeeSolver."""

from .config import Config, load_config
from .exceptions import BeeSolverError, ConfigurationError, SinkUnavailable, SourceUnavailable
from .puzzle import Puzzle
from .rules import MIN_WORD_LENGTH, RejectionReason, is_valid_word, rejection_reason

__all__ = [
    "BeeSolverError",
    "Config",
    "ConfigurationError",
    "MIN_WORD_LENGTH",
    "Puzzle",
    "RejectionReason",
    "SinkUnavailable",
    "SourceUnavailable",
    "is_valid_word",
    "load_config",
    "rejection_reason",
]
