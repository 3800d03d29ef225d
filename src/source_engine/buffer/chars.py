"""Character classes used by every scanner."""

from __future__ import annotations

WHITESPACE = frozenset(" \t\r")


def is_identifier_char(character: str) -> bool:
    """ASCII letters, digits, ``_`` and ``$`` can be part of an identifier."""

    if len(character) != 1:
        return False
    return (
        "a" <= character <= "z"
        or "A" <= character <= "Z"
        or "0" <= character <= "9"
        or character in "_$"
    )


def is_blank(character: str) -> bool:
    return len(character) == 1 and character in WHITESPACE


def char_at(text: str, index: int) -> str:
    """Return ``text[index]`` or ``""`` when the index falls outside the text."""

    if 0 <= index < len(text):
        return text[index]
    return ""


__all__ = ["WHITESPACE", "is_identifier_char", "is_blank", "char_at"]
