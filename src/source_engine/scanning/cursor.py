"""Whitespace-aware cursor navigation over a ``Source``."""

from __future__ import annotations

from source_engine.buffer import (
    Cursor,
    Source,
    char_at,
    ensure_line,
    is_blank,
    is_identifier_char,
)
from source_engine.errors import OutOfRangeError

from .literals import find_line_comment


def skip_blanks(text: str, character: int) -> int:
    """Skip insignificant whitespace in ``text`` starting at ``character``.

    Whitespace directly between two identifier characters separates tokens
    and is left alone.
    """

    if not is_blank(char_at(text, character)):
        return character
    if (
        character > 0
        and is_identifier_char(char_at(text, character - 1))
        and is_identifier_char(char_at(text, character + 1))
    ):
        return character
    while is_blank(char_at(text, character)):
        character += 1
    return character


def skip_whitespace(source: Source, line: int, character: int) -> int:
    ensure_line(source, line)
    return skip_blanks(source.get_line(line), character)


def skip_whitespace_lines(source: Source, line: int) -> int:
    """First line at or after ``line`` holding something other than whitespace.

    Falls back to the last line of the buffer.
    """

    while line < source.line_count:
        if any(not is_blank(character) for character in source.get_line(line)):
            return line
        line += 1
    return source.line_count - 1


def find_next_line_containing(source: Source, needle: str, line: int) -> int:
    while line < source.line_count and needle not in source.get_line(line):
        line += 1
    return line


def go_back_line(source: Source, line: int) -> Cursor:
    """Step to the previous line.

    Returns the previous line index and the offset of its last character,
    ignoring a trailing ``//`` comment. The offset is ``-1`` when nothing
    precedes the comment.
    """

    previous = line - 1
    if previous < 0:
        raise OutOfRangeError(
            "Nothing interesting before the location", cursor=(line, 0)
        )
    ensure_line(source, previous)
    text = source.get_line(previous)
    comment = find_line_comment(text)
    end = comment if comment >= 0 else len(text)
    return previous, end - 1


__all__ = [
    "skip_blanks",
    "skip_whitespace",
    "skip_whitespace_lines",
    "find_next_line_containing",
    "go_back_line",
]
