"""String-literal tracking and textual qualifier filters."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from source_engine.buffer import char_at

_CONST_WORD = re.compile(r"(?<![A-Za-z0-9_$])const[ \t]")
_REFERENCE = re.compile(r" ?&")


@dataclass(frozen=True, slots=True)
class ScanState:
    """Literal state carried from one scanned character to the next.

    Operations that accept a ``ScanState`` start from it instead of assuming
    the scan begins outside a literal, and multi-line operations hand back
    the state they ended in so a caller decides how far a literal may reach.
    """

    in_literal: bool = False

    def toggled(self) -> "ScanState":
        return ScanState(in_literal=not self.in_literal)

    def after(self, text: str, index: int) -> "ScanState":
        """State once ``text[index]`` has been consumed."""

        return self.toggled() if is_unescaped_quote(text, index) else self


OUTSIDE = ScanState()


def resolve_state(state: Optional[ScanState]) -> ScanState:
    return OUTSIDE if state is None else state


def is_unescaped_quote(text: str, index: int) -> bool:
    """A ``"`` is escaped only by a backslash right before it on the same line."""

    if char_at(text, index) != '"':
        return False
    return index == 0 or text[index - 1] != "\\"


def scan_text(text: str, state: Optional[ScanState] = None) -> ScanState:
    """Return the literal state reached at the end of ``text``."""

    current = resolve_state(state)
    for index in range(len(text)):
        current = current.after(text, index)
    return current


def find_line_comment(text: str, state: Optional[ScanState] = None) -> int:
    """Offset of the first ``//`` outside a string literal, or ``-1``."""

    current = resolve_state(state)
    for index, character in enumerate(text):
        if (
            not current.in_literal
            and character == "/"
            and char_at(text, index + 1) == "/"
        ):
            return index
        current = current.after(text, index)
    return -1


def get_string_literal(text: str) -> str:
    """Concatenate everything found between unescaped double quotes."""

    collected = []
    in_literal = False
    for index, character in enumerate(text):
        if is_unescaped_quote(text, index):
            in_literal = not in_literal
        elif in_literal:
            collected.append(character)
    return "".join(collected)


def remove_const(text: str) -> str:
    return _CONST_WORD.sub("", text)


def remove_reference(text: str) -> str:
    return _REFERENCE.sub("", text)


__all__ = [
    "ScanState",
    "OUTSIDE",
    "resolve_state",
    "is_unescaped_quote",
    "scan_text",
    "find_line_comment",
    "get_string_literal",
    "remove_const",
    "remove_reference",
]
