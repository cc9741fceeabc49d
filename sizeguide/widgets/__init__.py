"""Reusable Qt helpers for the drawer."""

from .focusable import compute_focusable, is_tab_focusable

__all__ = ["compute_focusable", "is_tab_focusable"]
