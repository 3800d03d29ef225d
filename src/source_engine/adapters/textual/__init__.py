"""Textual comparison viewer; the controller has no Textual dependency."""

from .controller import ComparisonController, ComparisonHooks, ComparisonView

__all__ = ["ComparisonController", "ComparisonHooks", "ComparisonView"]
