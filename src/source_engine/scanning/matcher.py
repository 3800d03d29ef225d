"""Whitespace-tolerant, multi-line occurrence matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from source_engine.buffer import Source, char_at, is_blank, is_identifier_char
from source_engine.runtime.telemetry import span

from .cursor import skip_blanks
from .literals import ScanState, resolve_state

# Receives the match's end position and whether it stayed on one line;
# returns the line to resume scanning on (``None`` keeps going in place).
OccurrenceCallback = Callable[[int, int, bool], Optional[int]]


@dataclass(frozen=True, slots=True)
class Occurrence:
    line: int
    character: int
    one_line: bool


def match_at(
    source: Source,
    line: int,
    character: int,
    sought: str,
    state: Optional[ScanState] = None,
) -> Optional[Occurrence]:
    """Try to consume ``sought`` starting exactly at ``(line, character)``.

    Returns the position right after the match, or ``None``.
    """

    literal = resolve_state(state)
    passed = 0
    previous = ""
    gap = False
    one_line = True
    while passed < len(sought):
        text = source.get_line(line)
        expected = sought[passed]
        current = char_at(text, character)

        if not current:
            if literal.in_literal:
                return None
            if is_identifier_char(previous) and is_identifier_char(expected):
                return None
            line += 1
            if line >= source.line_count:
                return None
            character = skip_blanks(source.get_line(line), 0)
            one_line = False
            gap = True
            continue

        if is_blank(expected) and not literal.in_literal:
            if not (gap or is_blank(current)):
                return None
            while is_blank(char_at(text, character)):
                character += 1
            passed += 1
            previous = expected
            gap = True
            continue

        if current != expected:
            return None
        # two pattern identifier characters must not be joined across a gap
        if gap and is_identifier_char(previous) and is_identifier_char(expected):
            return None

        literal = literal.after(text, character)
        character += 1
        passed += 1
        previous = expected
        gap = False
        if not literal.in_literal:
            skipped = skip_blanks(text, character)
            gap = skipped != character
            character = skipped

    return Occurrence(line=line, character=character, one_line=one_line)


def iterate_through_occurrences(
    source: Source,
    sought: str,
    callback: OccurrenceCallback,
    state: Optional[ScanState] = None,
) -> ScanState:
    """Invoke ``callback`` for every occurrence of ``sought`` in ``source``.

    ``sought`` should contain whitespace only where it separates two
    identifiers. A line returned by the callback beyond the line where the
    match started moves the scan to the start of that line; anything else
    continues right after the match's first character. Lines are re-read
    after every callback, so the callback may ``splice`` the buffer.

    Returns the literal state at the point the scan stopped.
    """

    if not sought:
        raise ValueError("sought pattern cannot be empty")

    current = resolve_state(state)
    with span(
        "scanning::iterate_through_occurrences",
        component="scanning",
        metadata={"sought": sought, "lines": source.line_count},
    ) as handle:
        matches = 0
        line = 0
        while line < source.line_count:
            jumped = False
            character = 0
            text = source.get_line(line)
            while character < len(text):
                if text[character] == sought[0]:
                    found = match_at(source, line, character, sought, current)
                    if found is not None:
                        matches += 1
                        resume = callback(found.line, found.character, found.one_line)
                        if resume is not None and resume > line:
                            line, jumped = resume, True
                            break
                        if line >= source.line_count:
                            break
                        text = source.get_line(line)
                current = current.after(text, character)
                character += 1
            if not jumped:
                line += 1
        handle.add_metadata("matches", matches)
    return current


def find_occurrences(
    source: Source, sought: str, state: Optional[ScanState] = None
) -> List[Occurrence]:
    found: List[Occurrence] = []

    def _collect(line: int, character: int, one_line: bool) -> None:
        found.append(Occurrence(line=line, character=character, one_line=one_line))
        return None

    iterate_through_occurrences(source, sought, _collect, state)
    return found


__all__ = [
    "Occurrence",
    "OccurrenceCallback",
    "match_at",
    "iterate_through_occurrences",
    "find_occurrences",
]
