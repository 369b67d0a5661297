"""Errors raised by confstash.

Every failure surfaces as a ConfstashError subclass. Callers that only care
whether an operation worked can catch the base class and branch on ``kind``;
the originating exception (OSError, codec diagnostic) is kept as ``cause`` and
chained as ``__cause__``.
"""

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Category of a confstash failure."""

    PATH_RESOLUTION = "path_resolution"
    IO_FAILURE = "io_failure"
    BAD_CONFIG = "bad_config"


class ConfstashError(Exception):
    """Base exception for all confstash errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
        path: File or directory the operation was working on, if known.
        cause: Underlying exception, if any.
        kind: Category of the failure.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        cause: BaseException | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause
        self.hint = hint

    def __str__(self) -> str:
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


class PathResolutionError(ConfstashError):
    """The config directory could not be determined or created."""

    kind = ErrorKind.PATH_RESOLUTION


class IoFailureError(ConfstashError):
    """The config file could not be opened, read, written or flushed."""

    kind = ErrorKind.IO_FAILURE


class BadConfigError(ConfstashError):
    """The config could not be decoded into, or encoded from, the target type."""

    kind = ErrorKind.BAD_CONFIG
