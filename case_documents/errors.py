"""
Error types raised by the retrieval core.

Every error carries a ``kind`` tag and the HTTP status the adapter layer
should answer with.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    SEARCH_EXECUTION = "search_execution"


class DocumentServiceError(Exception):
    """Base class for all errors surfaced by the core."""

    kind: ErrorKind = ErrorKind.SEARCH_EXECUTION
    default_status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code})"


class ConfigurationError(DocumentServiceError):
    """Required configuration is missing. Raised at wiring time, never retryable."""

    kind = ErrorKind.CONFIGURATION
    default_status_code = 500


class InvalidArgument(DocumentServiceError):
    kind = ErrorKind.INVALID_ARGUMENT
    default_status_code = 400


class NotFound(DocumentServiceError):
    kind = ErrorKind.NOT_FOUND
    default_status_code = 404


class SearchExecutionError(DocumentServiceError):
    """The search index call itself failed. The underlying error is kept as ``__cause__``."""

    kind = ErrorKind.SEARCH_EXECUTION
    default_status_code = 502

    def __init__(self, message: str, *, index: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message, status_code=status_code)
        self.index = index


def status_code_of(exc: BaseException, default: int = 500) -> int:
    """Return the HTTP status attached to an arbitrary exception, if any."""
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return default
