"""Literal-aware navigation, matching and list parsing over a ``Source``."""

from source_engine.buffer import is_identifier_char

from .assignment import what_is_it_assigned_to
from .cursor import (
    find_next_line_containing,
    go_back_line,
    skip_blanks,
    skip_whitespace,
    skip_whitespace_lines,
)
from .lists import find_end_of_list, get_till_end_of_list, parse_list
from .literals import (
    OUTSIDE,
    ScanState,
    find_line_comment,
    get_string_literal,
    is_unescaped_quote,
    remove_const,
    remove_reference,
    scan_text,
)
from .matcher import (
    Occurrence,
    OccurrenceCallback,
    find_occurrences,
    iterate_through_occurrences,
    match_at,
)

__all__ = [
    "is_identifier_char",
    "ScanState",
    "OUTSIDE",
    "scan_text",
    "is_unescaped_quote",
    "find_line_comment",
    "get_string_literal",
    "remove_const",
    "remove_reference",
    "skip_blanks",
    "skip_whitespace",
    "skip_whitespace_lines",
    "find_next_line_containing",
    "go_back_line",
    "Occurrence",
    "OccurrenceCallback",
    "match_at",
    "iterate_through_occurrences",
    "find_occurrences",
    "what_is_it_assigned_to",
    "parse_list",
    "find_end_of_list",
    "get_till_end_of_list",
]
