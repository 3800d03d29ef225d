"""Normalization passes producing canonical buffers."""

from .normalizer import (
    LiteralScope,
    clean_all,
    normalise_line,
    normalise_line_with_state,
)

__all__ = ["LiteralScope", "clean_all", "normalise_line", "normalise_line_with_state"]
