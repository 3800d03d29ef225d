from __future__ import annotations

from typing import List, Optional, Tuple

import pytest

from source_engine.buffer import Source
from source_engine.scanning import (
    Occurrence,
    ScanState,
    find_occurrences,
    iterate_through_occurrences,
)


def collect_lines(source: Source, sought: str) -> List[int]:
    return [occurrence.line for occurrence in find_occurrences(source, sought)]


def test_one_callback_per_line() -> None:
    source = Source.from_text("int a = 0;\n\tint b = 0;\n   int c = 0;")
    calls: List[Tuple[int, int, bool]] = []

    def callback(line: int, character: int, one_line: bool) -> int:
        calls.append((line, character, one_line))
        return line + 1

    iterate_through_occurrences(source, "int", callback)

    assert calls == [(0, 3, True), (1, 4, True), (2, 6, True)]


def test_whitespace_inside_pattern_is_optional() -> None:
    source = Source.from_text(
        "int a = 0;\n\tunique_ptr<int> b;\n   unique_ptr<  int> c;"
    )

    assert collect_lines(source, "unique_ptr<int>") == [1, 2]


def test_match_across_lines() -> None:
    source = Source(["foo(", "   bar)"])

    assert find_occurrences(source, "foo(bar)") == [
        Occurrence(line=1, character=7, one_line=False)
    ]


def test_identifier_is_not_split_across_lines() -> None:
    assert find_occurrences(Source(["in", "t x"]), "int") == []


def test_pattern_space_matches_line_break() -> None:
    occurrences = find_occurrences(Source(["int", "  a = 1;"]), "int a")

    assert occurrences == [Occurrence(line=1, character=4, one_line=False)]


def test_pattern_space_matches_whitespace_run() -> None:
    occurrences = find_occurrences(Source(["int   a"]), "int a")

    assert occurrences == [Occurrence(line=0, character=7, one_line=True)]


def test_whitespace_never_joins_identifiers() -> None:
    assert find_occurrences(Source(["int  a"]), "inta") == []


def test_literal_contents_match_verbatim() -> None:
    source = Source(['s = "a  b";'])

    assert find_occurrences(source, '"a b"') == []
    assert collect_lines(source, '"a  b"') == [0]


def test_continue_in_place_finds_every_occurrence() -> None:
    assert len(find_occurrences(Source(["aa aa"]), "aa")) == 2
    assert len(find_occurrences(Source(["aaa"]), "aa")) == 2


def test_callback_may_rewrite_the_buffer() -> None:
    source = Source(["old(1);", "old(2);", "keep();"])
    seen: List[int] = []

    def rewrite(line: int, character: int, one_line: bool) -> Optional[int]:
        seen.append(line)
        text = source.get_line(line)
        source.splice(line, line + 1, [text.replace("old", "new")])
        return line + 1

    iterate_through_occurrences(source, "old(", rewrite)

    assert seen == [0, 1]
    assert source.lines == ["new(1);", "new(2);", "keep();"]


def test_returns_final_literal_state() -> None:
    state = iterate_through_occurrences(
        Source(['x = "open']), "x", lambda line, character, one_line: None
    )

    assert state == ScanState(in_literal=True)


def test_empty_pattern_is_rejected() -> None:
    with pytest.raises(ValueError):
        iterate_through_occurrences(Source(["a"]), "", lambda *args: None)
