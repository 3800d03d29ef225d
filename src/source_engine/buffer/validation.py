"""Validation helpers shared across scanning services."""

from __future__ import annotations

from source_engine.errors import OutOfRangeError

from .source import Source
from .state import Cursor


def ensure_line(source: Source, line: int) -> int:
    if line < 0 or line >= source.line_count:
        raise OutOfRangeError(f"Line {line} out of range", cursor=(line, 0))
    return line


def ensure_cursor(source: Source, cursor: Cursor) -> Cursor:
    """Accept positions up to one past the end of the line."""

    line, character = cursor
    ensure_line(source, line)
    if character < 0 or character > len(source.get_line(line)):
        raise OutOfRangeError(f"Character {character} out of range", cursor=cursor)
    return cursor
