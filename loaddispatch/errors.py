# load-dispatch/loaddispatch/errors.py
"""Exceptions raised by the load dispatcher."""

from __future__ import annotations

from typing import Optional


class InputIOError(OSError):
    """The input file could not be opened or read."""


class InputFormatError(ValueError):
    """
    A record in the input file does not have the expected shape.

    Attributes:
        path: File the record came from
        line_number: 1-based line number in that file (None if unknown)
    """

    def __init__(self, message: str, path: Optional[str] = None, line_number: Optional[int] = None) -> None:
        self.path = path
        self.line_number = line_number
        if path is not None and line_number is not None:
            message = f"{path}:{line_number}: {message}"
        super().__init__(message)


class EmptyCandidateSet(ValueError):
    """Nearest-neighbor search was asked to choose from no candidates."""
