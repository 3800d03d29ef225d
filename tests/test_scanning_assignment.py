import pytest

from source_engine.buffer import Source
from source_engine.errors import AmbiguousAssignmentError, OutOfRangeError
from source_engine.scanning import what_is_it_assigned_to


def test_assignment_on_same_line() -> None:
    source = Source.from_text("int a = 0;\n\tint b = 0;\n   int c = 0;")

    assert what_is_it_assigned_to(source, 0, 8) == "a"


def test_assignment_before_comment_on_previous_line() -> None:
    source = Source.from_text("   int ahoy = // now a nice number\n512;")

    assert what_is_it_assigned_to(source, 1, 2) == "ahoy"


def test_identifier_at_line_start() -> None:
    assert what_is_it_assigned_to(Source(["total = 1;"]), 0, 8) == "total"


def test_walks_back_over_empty_lines() -> None:
    source = Source(["value =", "", "   42;"])

    assert what_is_it_assigned_to(source, 2, 3) == "value"


def test_semicolon_before_identifier_is_ambiguous() -> None:
    with pytest.raises(AmbiguousAssignmentError) as excinfo:
        what_is_it_assigned_to(Source(["a; = 5"]), 0, 5)

    assert excinfo.value.cursor == (0, 1)


def test_no_assignment_before_position() -> None:
    with pytest.raises(OutOfRangeError):
        what_is_it_assigned_to(Source(["  42;"]), 0, 2)


def test_invalid_position() -> None:
    with pytest.raises(OutOfRangeError):
        what_is_it_assigned_to(Source(["a = 1;"]), 5, 0)
