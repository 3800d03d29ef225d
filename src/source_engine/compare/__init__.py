"""Fuzzy comparison of canonical buffers."""

from .comparator import mismatches, normalised_mismatches

__all__ = ["mismatches", "normalised_mismatches"]
