"""Focus containment decision for the open drawer (pure, no Qt)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

TAB_KEY = "Tab"
ESCAPE_KEY = "Escape"


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """A toolkit-independent key press."""

    key: str
    shift: bool = False


@dataclass(frozen=True, slots=True)
class TrapDecision:
    prevent_default: bool = False
    refocus: Optional[Any] = None


PASS_THROUGH = TrapDecision()


def trap_tab(stroke: KeyStroke, focusable: Sequence[Any], current: Any) -> TrapDecision:
    """
    Decide whether a traversal key press must wrap around inside the drawer.

    Forward traversal from the last element wraps to the first, backward
    traversal from the first wraps to the last. Any other key or position is
    left to the toolkit's default handling.
    """
    if stroke.key != TAB_KEY or not focusable:
        return PASS_THROUGH

    first = focusable[0]
    last = focusable[-1]

    if stroke.shift:
        if current is not None and current == first:
            return TrapDecision(prevent_default=True, refocus=last)
    elif current is not None and current == last:
        return TrapDecision(prevent_default=True, refocus=first)

    return PASS_THROUGH
