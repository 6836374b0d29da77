"""
errors.py - Error taxonomy for the board engine
Single responsibility: name the two recoverable failure kinds.
"""


class TrackerError(Exception):
    """Base class for recoverable board errors."""


class DataUnavailable(TrackerError):
    """The issue snapshot is missing, empty, unparseable or not an array."""

    def __init__(self, message: str, reason: str = ""):
        super().__init__(message)
        self.message = message
        self.reason = reason


class EvaluationFailure(TrackerError):
    """An unexpected fault while filtering, searching or rendering."""

    def __init__(self, operation: str, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.operation = operation
        self.message = message
        self.cause = cause
