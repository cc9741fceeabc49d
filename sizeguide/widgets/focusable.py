"""
Focusable widget discovery
==========================

Lists the widgets of a container that keyboard traversal can currently reach,
in document (pre-order) order.
"""

from typing import List

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget


def is_tab_focusable(widget: QWidget) -> bool:
    """Visible (no hidden ancestor), enabled, and reachable with Tab."""
    if not widget.isVisible() or not widget.isEnabled():
        return False
    tab_focus = _flag_value(Qt.FocusPolicy.TabFocus)
    return (_flag_value(widget.focusPolicy()) & tab_focus) == tab_focus


def _flag_value(flag) -> int:
    return int(getattr(flag, "value", flag))


def _walk(widget: QWidget, found: List[QWidget]) -> None:
    for child in widget.children():
        if not isinstance(child, QWidget) or child.isWindow():
            continue
        if is_tab_focusable(child):
            found.append(child)
        _walk(child, found)


def compute_focusable(container: QWidget) -> List[QWidget]:
    """Tab-reachable descendants of ``container`` in document order."""
    found: List[QWidget] = []
    if container is None:
        return found
    _walk(container, found)
    return found
