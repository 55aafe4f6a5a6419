"""Exception types raised by BeeSolver."""


class BeeSolverError(Exception):
    """Base class for all BeeSolver errors."""


class ConfigurationError(BeeSolverError, ValueError):
    """Raised when the puzzle or configuration is invalid (e.g. no letters)."""


class SourceUnavailable(BeeSolverError, OSError):
    """Raised when the dictionary source cannot be opened or read."""


class SinkUnavailable(BeeSolverError, OSError):
    """Raised when results cannot be written to their destination."""
