"""
Exception hierarchy for jsonmend.

StrictParseError is internal: it marks a failed strict parse and is always
recovered by the engine. RecoveryError and its subclasses are the only
exceptions surfaced to callers.
"""

import json
from typing import Optional


class jsonmendError(Exception):
    """Base exception for jsonmend."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StrictParseError(jsonmendError):
    """Text failed strict JSON parsing."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message)
        self.position = position
        self.line = line
        self.column = column

    @classmethod
    def from_decode_error(cls, error: json.JSONDecodeError) -> "StrictParseError":
        """Wrap a json.JSONDecodeError, keeping its position."""
        return cls(str(error), error.pos, error.lineno, error.colno)


class RecoveryError(jsonmendError, ValueError):
    """Raised when text cannot be turned into strict JSON."""

    def __init__(
        self,
        message: str,
        cause: Optional[str] = None,
        preview: Optional[str] = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.preview = preview


class RecoveryExhausted(RecoveryError):
    """All repair stages ran and the result is still not valid JSON."""
