"""Error hierarchy for objkit."""
from __future__ import annotations


class ObjkitError(Exception):
    """Base error for all objkit errors."""


class SerializationError(ObjkitError):
    """A value could not be encoded to or decoded from JSON."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
