"""
Loader Errors
=============
Every failure while loading a mesh surfaces as a `MeshLoadError`.
Callers that care about the cause distinguish `MeshIOError` (file missing or
unreadable) from `ParseError` (malformed content).
"""
from __future__ import annotations

from typing import Optional


class MeshLoadError(Exception):
    """Base class for all mesh loading failures."""


class MeshIOError(MeshLoadError):
    """A geometry or material file could not be opened or read."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Cannot read '{filename}': {reason}")


class ParseError(MeshLoadError, ValueError):
    """
    Malformed content in a geometry or material file.

    Attributes:
        filename: File the offending line was read from.
        line_number: 1-based line number.
        token: The offending token (or keyword), if one can be singled out.
    """

    def __init__(
        self,
        message: str,
        filename: str,
        line_number: int,
        token: Optional[str] = None,
    ) -> None:
        self.message = message
        self.filename = filename
        self.line_number = line_number
        self.token = token
        location = f"{filename}:{line_number}"
        if token is not None:
            location += f" (near '{token}')"
        super().__init__(f"{location}: {message}")
