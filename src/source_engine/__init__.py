"""Literal-aware scanning, normalization and fuzzy comparison of source text."""

__all__ = [
    "adapters",
    "buffer",
    "compare",
    "errors",
    "runtime",
    "scanning",
    "transform",
]

__version__ = "0.1.0"
