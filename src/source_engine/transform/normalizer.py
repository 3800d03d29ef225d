"""Comment stripping and whitespace canonicalization."""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from source_engine.buffer import Source, char_at, is_blank, is_identifier_char
from source_engine.runtime.telemetry import span
from source_engine.scanning.literals import OUTSIDE, ScanState, resolve_state

LiteralScope = Literal["line", "buffer"]


def normalise_line_with_state(
    line: str, state: Optional[ScanState] = None
) -> Tuple[str, ScanState]:
    """Canonical form of ``line`` plus the literal state at its end.

    The line is cut at a ``//`` outside string literals, and carriage returns
    are dropped. Outside literals, a whitespace run survives as one space only
    where it separates two identifier characters.
    """

    literal = resolve_state(state)
    result: List[str] = []
    index = 0
    while index < len(line):
        character = line[index]
        if literal.in_literal:
            if character != "\r":
                result.append(character)
            literal = literal.after(line, index)
            index += 1
            continue
        if character == "/" and char_at(line, index + 1) == "/":
            break
        if not is_blank(character):
            result.append(character)
            literal = literal.after(line, index)
            index += 1
            continue

        end = index
        while is_blank(char_at(line, end)):
            end += 1
        if (
            index > 0
            and is_identifier_char(line[index - 1])
            and is_identifier_char(char_at(line, end))
        ):
            result.append(" ")
        index = end
    return "".join(result), literal


def normalise_line(line: str, state: Optional[ScanState] = None) -> str:
    return normalise_line_with_state(line, state)[0]


def _strip_block_comments(
    text: str, literal: ScanState, in_comment: bool
) -> Tuple[str, bool]:
    kept: List[str] = []
    index = 0
    while index < len(text):
        character = text[index]
        if in_comment:
            if character == "*" and char_at(text, index + 1) == "/":
                in_comment = False
                index += 2
            else:
                index += 1
            continue
        if not literal.in_literal and character == "/":
            following = char_at(text, index + 1)
            if following == "*":
                # a comment separates tokens like whitespace does
                kept.append(" ")
                in_comment = True
                index += 2
                continue
            if following == "/":
                kept.append(text[index:])
                break
        literal = literal.after(text, index)
        kept.append(character)
        index += 1
    return "".join(kept), in_comment


def clean_all(source: Source, literal_scope: LiteralScope = "line") -> Source:
    """Return a canonical copy of ``source``.

    Block comments are removed (they may span lines), every line goes through
    ``normalise_line`` and lines left empty are dropped. With the default
    ``literal_scope="line"`` a string literal never continues onto the next
    line; ``"buffer"`` carries the literal state from line to line.
    """

    if literal_scope not in ("line", "buffer"):
        raise ValueError(f"Unknown literal scope '{literal_scope}'")

    with span(
        "transform::clean_all",
        component="transform",
        metadata={"lines": source.line_count, "literal_scope": literal_scope},
    ) as handle:
        cleaned: List[str] = []
        in_comment = False
        literal = OUTSIDE
        for text in source:
            if literal_scope == "line":
                literal = OUTSIDE
            stripped, in_comment = _strip_block_comments(text, literal, in_comment)
            normalised, literal = normalise_line_with_state(stripped, literal)
            if normalised:
                cleaned.append(normalised)
        handle.add_metadata("kept", len(cleaned))
    return source.replace(cleaned)


__all__ = [
    "LiteralScope",
    "normalise_line",
    "normalise_line_with_state",
    "clean_all",
]
