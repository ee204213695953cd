"""Error types raised by the layout reconciliation engine.

Every error carries the offending path (when one exists) and an
ErrorKind so callers can render or branch on the failure category.
"""

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Category of a layout error.

    Attributes:
        INVALID_INPUT: Caller-supplied value rejected before any I/O.
        NOT_FOUND: Expected parent or source path is missing.
        CONFLICT: Destination is already occupied.
        IO_FAILURE: Underlying storage error (permissions, devices, ...).
    """

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    IO_FAILURE = "io_failure"


class LayoutError(Exception):
    """Base exception for layout errors."""

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path.as_posix()}"


class InvalidInputError(LayoutError):
    """Raised when a base directory name or schema value is malformed."""

    kind = ErrorKind.INVALID_INPUT


class PathNotFoundError(LayoutError):
    """Raised when a required parent or source path does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(LayoutError):
    """Raised when a destination path is already occupied."""

    kind = ErrorKind.CONFLICT


class IOFailureError(LayoutError):
    """Raised when the underlying filesystem operation fails."""

    kind = ErrorKind.IO_FAILURE
