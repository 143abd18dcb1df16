"""Exceptions raised while building or publishing a feed."""

from typing import Any


class FeedError(Exception):
    """Base class for rsspod errors."""


class InvalidDateError(FeedError, TypeError):
    """A date setter received a value it cannot turn into a date."""

    def __init__(self, operation: str, value: Any, reason: str | None = None):
        self.operation = operation
        self.value = value
        self.reason = reason
        if reason is None:
            message = (
                f"{operation}() error: invalid date type {type(value).__name__!r}; "
                "expected datetime, int (Unix seconds) or str"
            )
        else:
            message = f"{operation}() error: date {value!r} out of range: {reason}"
        super().__init__(message)


class SerializationError(FeedError):
    """The channel cannot be rendered as XML."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot serialize {path}: {reason}")
