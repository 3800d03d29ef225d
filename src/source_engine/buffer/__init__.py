"""Text buffer, cursor alias and character classes."""

from .chars import WHITESPACE, char_at, is_blank, is_identifier_char
from .source import PathLike, Source
from .state import Cursor
from .validation import ensure_cursor, ensure_line

__all__ = [
    "Source",
    "PathLike",
    "Cursor",
    "WHITESPACE",
    "char_at",
    "is_blank",
    "is_identifier_char",
    "ensure_cursor",
    "ensure_line",
]
