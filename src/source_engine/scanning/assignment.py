"""Backward heuristic that finds the variable an expression is assigned to."""

from __future__ import annotations

from source_engine.buffer import (
    Cursor,
    Source,
    char_at,
    ensure_cursor,
    is_identifier_char,
)
from source_engine.errors import AmbiguousAssignmentError

from .cursor import go_back_line


def _step_back(source: Source, line: int, character: int) -> Cursor:
    character -= 1
    while character < 0:
        line, character = go_back_line(source, line)
    return line, character


def what_is_it_assigned_to(source: Source, line: int, character: int) -> str:
    """Return the identifier on the left of the nearest ``=`` before a position.

    This is a lexical guess, not a parse. Trailing ``//`` comments of the
    lines it walks back over are ignored. Running into a ``;`` between the
    ``=`` and the identifier raises ``AmbiguousAssignmentError``, since the
    ``=`` probably belongs to something else, such as a lambda.
    """

    ensure_cursor(source, (line, character))
    while char_at(source.get_line(line), character) != "=":
        line, character = _step_back(source, line, character)

    while not is_identifier_char(char_at(source.get_line(line), character)):
        line, character = _step_back(source, line, character)
        if char_at(source.get_line(line), character) == ";":
            raise AmbiguousAssignmentError(
                "Semicolon ; before assignment (can possibly be in a lambda)",
                cursor=(line, character),
            )

    text = source.get_line(line)
    end = character
    while character >= 0 and is_identifier_char(char_at(text, character)):
        character -= 1
    return text[character + 1 : end + 1]


__all__ = ["what_is_it_assigned_to"]
