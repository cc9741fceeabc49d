"""
Drawer coordination logic.

Everything in this package is pure Python: the Qt widgets in ``views`` and the
workers in ``workers`` plug into the protocols declared in ``base``.
"""

from .base import FetchRequest, FetchResult, Fetcher, PanelView, Scheduler
from .focus import KeyStroke, TrapDecision, trap_tab
from .panel_controller import (
    ContentKind,
    ContentState,
    FetchCache,
    FetchStatus,
    PanelController,
    PanelPhase,
    TriggerSpec,
)

__all__ = [
    "FetchRequest",
    "FetchResult",
    "Fetcher",
    "PanelView",
    "Scheduler",
    "KeyStroke",
    "TrapDecision",
    "trap_tab",
    "ContentKind",
    "ContentState",
    "FetchCache",
    "FetchStatus",
    "PanelController",
    "PanelPhase",
    "TriggerSpec",
]
