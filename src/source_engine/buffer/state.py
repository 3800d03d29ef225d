"""Cursor positions shared by every scanning operation."""

from __future__ import annotations

from source_engine.errors import Cursor

__all__ = ["Cursor"]
