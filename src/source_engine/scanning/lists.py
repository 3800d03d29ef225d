"""Nested-delimiter list parsing and end-of-list location."""

from __future__ import annotations

from typing import List, Optional

from source_engine.buffer import Cursor, Source, ensure_cursor, is_blank
from source_engine.errors import UnterminatedListError
from source_engine.runtime.telemetry import span

from .cursor import skip_blanks
from .literals import ScanState, is_unescaped_quote, resolve_state


def parse_list(
    source: Source,
    line: int,
    character: int,
    separator: str,
    ender: str,
    opener: Optional[str] = None,
    state: Optional[ScanState] = None,
) -> List[str]:
    """Split the list that starts at ``(line, character)`` into its elements.

    The position must already be inside the list, past its opening
    delimiter. Separators only split at depth 0 outside string literals.
    Nested ``opener``/``ender`` pairs stay in the element text, and parsing
    stops at the ``ender`` that closes the list. Leading whitespace of every
    element is dropped. A literal running over a line break keeps a ``\\n``.
    """

    ensure_cursor(source, (line, character))
    literal = resolve_state(state)
    depth = 0
    elements: List[str] = []
    current: List[str] = []
    with span(
        "scanning::parse_list",
        component="scanning",
        metadata={"line": line, "character": character, "ender": ender},
    ) as handle:
        while True:
            text = source.get_line(line)
            if character >= len(text):
                if line + 1 >= source.line_count:
                    raise UnterminatedListError(
                        f"List is not closed by '{ender}'", cursor=(line, character)
                    )
                line += 1
                if literal.in_literal:
                    current.append("\n")
                    character = 0
                else:
                    character = skip_blanks(source.get_line(line), 0)
                continue

            symbol = text[character]
            if not literal.in_literal and symbol == opener:
                depth += 1
                current.append(symbol)
            elif not literal.in_literal and symbol == ender:
                if depth == 0:
                    break
                depth -= 1
                current.append(symbol)
            elif is_unescaped_quote(text, character):
                literal = literal.toggled()
                current.append(symbol)
            elif not literal.in_literal and not current and is_blank(symbol):
                pass
            elif not literal.in_literal and depth == 0 and symbol == separator:
                elements.append("".join(current))
                current = []
            else:
                current.append(symbol)
            character += 1

        elements.append("".join(current))
        handle.add_metadata("elements", len(elements))
    return elements


def find_end_of_list(
    source: Source,
    line: int,
    character: int,
    starting: str,
    ending: str,
    starting_depth: int = 0,
    state: Optional[ScanState] = None,
    ignore_literals: bool = False,
) -> Cursor:
    """Return the position of the ``ending`` that brings depth back to zero.

    Delimiters inside string literals do not count unless
    ``ignore_literals`` is set.
    """

    ensure_cursor(source, (line, character))
    depth = starting_depth
    literal = resolve_state(state)
    while line < source.line_count:
        text = source.get_line(line)
        while character < len(text):
            symbol = text[character]
            if not ignore_literals and is_unescaped_quote(text, character):
                literal = literal.toggled()
            elif ignore_literals or not literal.in_literal:
                if symbol == starting:
                    depth += 1
                elif symbol == ending:
                    depth -= 1
                    if depth == 0:
                        return line, character
            character += 1
        line += 1
        character = 0
    raise UnterminatedListError(
        "End of list not found", cursor=(source.line_count - 1, character)
    )


def get_till_end_of_list(
    source: Source,
    line: int,
    character: int,
    starting: str,
    ending: str,
    starting_depth: int = 0,
    state: Optional[ScanState] = None,
    ignore_literals: bool = False,
) -> str:
    """Text from a position up to, not including, the end of its list.

    Lines after the first are joined without their leading whitespace.
    """

    end_line, end_character = find_end_of_list(
        source,
        line,
        character,
        starting,
        ending,
        starting_depth,
        state=state,
        ignore_literals=ignore_literals,
    )
    first = source.get_line(line)
    if end_line == line:
        return first[character:end_character]

    parts = [first[character:]]
    for index in range(line + 1, end_line + 1):
        text = source.get_line(index)
        start = skip_blanks(text, 0)
        parts.append(text[start:] if index < end_line else text[start:end_character])
    return "".join(parts)


__all__ = ["parse_list", "find_end_of_list", "get_till_end_of_list"]
