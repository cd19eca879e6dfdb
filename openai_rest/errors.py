"""Exceptions raised when a caller chains on a failed or incomplete result."""

from __future__ import annotations

from typing import Any


class OpenAIError(Exception):
    """Base class for faults raised by this library."""

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message)
        self.detail = detail


class ResultError(OpenAIError):
    """A ``Failure`` result was used where a successful payload was required."""


class MissingFieldError(OpenAIError, LookupError):
    """A required field or list entry is absent from a decoded payload."""

    def __init__(self, field: str, detail: Any = None):
        super().__init__(f"Missing required field: {field}", detail)
        self.field = field
