"""JSON bridge error types."""

from __future__ import annotations


class BridgeError(Exception):
    """Base error for all JSON bridge failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ParseError(BridgeError):
    """Raised when text is not a JSON object that can be decoded."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message, cause=cause)


class ConstructionError(BridgeError):
    """Raised when the target factory cannot be called with no arguments."""


class EncodeError(BridgeError):
    """Raised when a value has no JSON representation."""
