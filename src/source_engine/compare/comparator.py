"""Line-of-sight comparison of two flattened buffers."""

from __future__ import annotations

from typing import Optional, Tuple

from source_engine.buffer import Source
from source_engine.runtime.config import load_settings
from source_engine.runtime.telemetry import span
from source_engine.transform import LiteralScope, clean_all


def _window_matches(
    ahead: str, ahead_start: int, behind: str, behind_start: int, window: int
) -> bool:
    # the advanced string must hold the whole window
    length = min(window, len(behind) - behind_start)
    if length <= 0 or ahead_start + length > len(ahead):
        return False
    return (
        ahead[ahead_start : ahead_start + length]
        == behind[behind_start : behind_start + length]
    )


def _resynchronize(
    first: str, i1: int, second: str, i2: int, window: int
) -> Optional[Tuple[int, int]]:
    """Find where the two strings line up again after a mismatch.

    Tries skipping ahead in ``first``, then in ``second``, by at most
    ``window - 1`` characters.
    """

    for shift in range(1, window):
        if _window_matches(first, i1 + shift, second, i2, window):
            return i1 + shift, i2
    for shift in range(1, window):
        if _window_matches(second, i2 + shift, first, i1, window):
            return i1, i2 + shift
    return None


def _context(text: str, index: int, window: int) -> str:
    return text[max(0, index - window) : index + window]


def mismatches(
    first: Source,
    second: Source,
    window_size: Optional[int] = None,
    report: Optional[bool] = None,
) -> int:
    """Count the places where two buffers differ.

    Both buffers are flattened and walked in step. After each mismatch the
    walk resumes at the nearest realignment within ``window_size``
    characters, so one inserted character costs one mismatch rather than a
    cascade. When no realignment is found the walk stops and the count so
    far is returned. A tail left over in only one string counts once.
    ``report`` logs every mismatch with its surroundings.
    """

    settings = load_settings()
    window = settings.resync_window if window_size is None else window_size
    if window <= 0:
        raise ValueError("window_size must be positive")
    verbose = settings.report_mismatches if report is None else report

    left = first.to_text(one_line=True)
    right = second.to_text(one_line=True)
    with span(
        "compare::mismatches",
        component="compare",
        metadata={"window": window, "first": len(left), "second": len(right)},
    ) as handle:
        errors = 0
        i1 = i2 = 0
        synced = True
        while i1 < len(left) and i2 < len(right):
            if left[i1] == right[i2]:
                i1 += 1
                i2 += 1
                continue
            errors += 1
            if verbose:
                handle.log(
                    "info",
                    "compare::mismatch",
                    first=_context(left, i1, window),
                    second=_context(right, i2, window),
                )
            realigned = _resynchronize(left, i1, right, i2, window)
            if realigned is None:
                synced = False
                if verbose:
                    handle.log(
                        "warning",
                        "compare::lost_sync",
                        reason="Could not catch up, difference might be too large",
                    )
                break
            i1, i2 = realigned

        # a tail left in only one string is one trailing difference
        if synced and (i1 < len(left)) != (i2 < len(right)):
            errors += 1
            if verbose:
                handle.log(
                    "info",
                    "compare::mismatch",
                    first=_context(left, i1, window),
                    second=_context(right, i2, window),
                )
        handle.add_metadata("mismatches", errors)
    return errors


def normalised_mismatches(
    first: Source,
    second: Source,
    window_size: Optional[int] = None,
    report: Optional[bool] = None,
    literal_scope: LiteralScope = "line",
) -> int:
    """``mismatches`` of the ``clean_all`` forms of both buffers."""

    return mismatches(
        clean_all(first, literal_scope),
        clean_all(second, literal_scope),
        window_size,
        report,
    )


__all__ = ["mismatches", "normalised_mismatches"]
