"""Typed failures raised by the scanning engine."""

from __future__ import annotations

from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (line, character)


class SourceEngineError(RuntimeError):
    """Base class for every error surfaced by ``source_engine``."""

    def __init__(self, message: str, *, cursor: Optional[Cursor] = None) -> None:
        super().__init__(message)
        self.cursor = cursor


class OutOfRangeError(SourceEngineError, IndexError):
    """Raised when a scan steps outside the buffer."""


class UnterminatedListError(SourceEngineError):
    """Raised when the buffer ends before a delimited list is closed."""


class AmbiguousAssignmentError(SourceEngineError):
    """Raised when assignment resolution crosses a statement terminator."""


class UnreadableSourceError(SourceEngineError):
    """Raised when a file or stream cannot be loaded into a buffer."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "Cursor",
    "SourceEngineError",
    "OutOfRangeError",
    "UnterminatedListError",
    "AmbiguousAssignmentError",
    "UnreadableSourceError",
]
