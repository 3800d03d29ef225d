import pytest

from source_engine.scanning import (
    OUTSIDE,
    ScanState,
    find_line_comment,
    get_string_literal,
    is_unescaped_quote,
    remove_const,
    remove_reference,
    scan_text,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("   ", ""),
        ('"om"', "om"),
        (' "a" "n"', "an"),
        (' "a"\n\t\t  "n"', "an"),
        (' "an\\""', 'an\\"'),
    ],
)
def test_get_string_literal(text: str, expected: str) -> None:
    assert get_string_literal(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("  mutable constipation& con;", "  mutable constipation& con;"),
        ("  const std::string& line;", "  std::string& line;"),
        ("const\tint x;", "int x;"),
        ("xconst a", "xconst a"),
    ],
)
def test_remove_const(text: str, expected: str) -> None:
    assert remove_const(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("  blablabla ", "  blablabla "),
        ("  const std::string& line;", "  const std::string line;"),
        ("a && b", "a b"),
    ],
)
def test_remove_reference(text: str, expected: str) -> None:
    assert remove_reference(text) == expected


def test_scan_state_toggles() -> None:
    assert OUTSIDE.in_literal is False
    assert OUTSIDE.toggled() == ScanState(in_literal=True)


def test_scan_text_tracks_open_literal() -> None:
    assert scan_text('say "hi').in_literal is True
    assert scan_text('"a\\"b"').in_literal is False


def test_scan_text_continues_from_state() -> None:
    assert scan_text('rest"', ScanState(in_literal=True)) == OUTSIDE


@pytest.mark.parametrize(
    ("text", "index", "expected"),
    [('"', 0, True), ('\\"', 1, False), ('a"', 1, True), ("a", 0, False)],
)
def test_is_unescaped_quote(text: str, index: int, expected: bool) -> None:
    assert is_unescaped_quote(text, index) is expected


def test_find_line_comment_skips_literals() -> None:
    assert find_line_comment('a = "//"; // c') == 10
    assert find_line_comment("abc") == -1
