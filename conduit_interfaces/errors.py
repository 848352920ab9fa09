"""
Exceptions raised by the output layer and command base.

Expected failures derive from ConduitError so the CLI can report them
without a traceback.
"""

from pathlib import Path


class ConduitError(Exception):
    """Base exception for conduit interface errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidFormatError(ConduitError, ValueError):
    """Requested output format is not supported."""

    def __init__(self, requested: str) -> None:
        super().__init__(f"Unsupported output format: {requested}")
        self.requested = requested


class OutputWriteError(ConduitError):
    """Writing formatted output to a file failed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write output to {path}: {reason}")
        self.path = path
        self.reason = reason


class RecordShapeError(ConduitError, ValueError):
    """A record does not match the field layout of the data set."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class SerializationError(ConduitError, ValueError):
    """A record value cannot be written as valid JSON (NaN or infinity)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Data cannot be written as JSON: {reason}")
        self.reason = reason
