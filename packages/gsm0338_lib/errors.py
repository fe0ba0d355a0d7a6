"""Exceptions raised by the GSM 03.38 transcoder."""

from __future__ import annotations


class GSMError(Exception):
    """Base class for transcoder failures."""


class GSMOutOfMemoryError(GSMError, MemoryError):
    """Raised when the output buffer cannot grow to the required size."""

    def __init__(self, requested: int, limit: int | None = None) -> None:
        self.requested = requested
        self.limit = limit
        if limit is None:
            message = f"Unable to allocate {requested} byte output buffer"
        else:
            message = f"Output buffer of {requested} bytes exceeds limit of {limit}"
        super().__init__(message)


__all__ = ["GSMError", "GSMOutOfMemoryError"]
