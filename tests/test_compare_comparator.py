import pytest

from source_engine.buffer import Source
from source_engine.compare import mismatches, normalised_mismatches
from source_engine.transform import clean_all


def make_clean(text: str) -> Source:
    return clean_all(Source.from_text(text))


def make_spread_pair() -> tuple[Source, Source]:
    # three inserted characters, then a substitution at the very end
    return Source(["abcdefghij1"]), Source(["abXYZcdefghij2"])


def test_single_substitution() -> None:
    count = mismatches(make_clean("ahahaha"), make_clean("aharaha"), 20, False)

    assert count == 1


@pytest.mark.parametrize(
    ("first", "second", "window"),
    [
        ("abXdefghijklm", "abYdefghijZklm", 5),
        ("ahahaha mwahaha", "aharaha mwaharaha", 3),
    ],
)
def test_unresolved_substitution_stops_the_walk(
    first: str, second: str, window: int
) -> None:
    count = mismatches(make_clean(first), make_clean(second), window, False)

    assert count == 1


def test_identical_buffers() -> None:
    source = make_clean("int a = 1;")

    assert mismatches(source, source, 5, False) == 0


def test_single_insertion() -> None:
    count = normalised_mismatches(
        Source(["return alpha+beta;"]),
        Source(["return alpha+bXeta;"]),
        20,
        False,
    )

    assert count == 1


def test_insertion_across_lines() -> None:
    first = Source(["int a;", "int b;"])
    second = Source(["int a;", "int bb;"])

    assert mismatches(first, second, 20, False) == 1


@pytest.mark.parametrize(
    ("first", "second"),
    [("abc", "abcX"), ("abcX", "abc"), ("abc", "Xabc")],
)
def test_insertion_at_either_end(first: str, second: str) -> None:
    assert mismatches(Source([first]), Source([second]), 20, False) == 1


def test_window_must_cover_the_insertion() -> None:
    first, second = make_spread_pair()

    assert mismatches(first, second, 3, False) == 1
    assert mismatches(first, second, 4, False) == 2


def test_lost_sync_stops_counting() -> None:
    assert mismatches(Source(["abcdef"]), Source(["uvwxyz"]), 2, False) == 1


def test_reporting_does_not_change_count() -> None:
    first, second = make_spread_pair()

    assert mismatches(first, second, 4, True) == 2
    assert mismatches(Source(["abc"]), Source(["abcX"]), 20, True) == 1


def test_window_must_be_positive() -> None:
    with pytest.raises(ValueError):
        mismatches(Source(["a"]), Source(["a"]), 0, False)


def test_window_defaults_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SOURCE_ENGINE_RESYNC_WINDOW", "3")
    monkeypatch.setenv("SOURCE_ENGINE_REPORT_MISMATCHES", "0")
    first, second = make_spread_pair()

    assert mismatches(first, second) == 1
