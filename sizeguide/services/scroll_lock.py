"""Reference-counted page scroll lock shared by every drawer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from ..config import DEFAULT_REDACTION_CONFIG
from ..logging.safe_logger import get_safe_logger

logger = get_safe_logger(__name__, cfg=DEFAULT_REDACTION_CONFIG)

LockApplier = Callable[[bool], None]


@dataclass(slots=True)
class ScrollLock:
    """
    Page scrolling is suppressed while at least one drawer holds the lock.

    Appliers are only called on the 0 -> 1 and 1 -> 0 transitions, so two open
    drawers do not fight over the page state.
    """

    _count: int = 0
    _appliers: List[LockApplier] = field(default_factory=list)

    @property
    def count(self) -> int:
        return self._count

    @property
    def locked(self) -> bool:
        return self._count > 0

    def add_applier(self, applier: LockApplier) -> None:
        """Register a callback applying the lock state to a scrollable surface."""

        if applier in self._appliers:
            return
        self._appliers.append(applier)
        if self.locked:
            applier(True)

    def remove_applier(self, applier: LockApplier) -> None:
        if applier in self._appliers:
            self._appliers.remove(applier)

    def acquire(self) -> None:
        self._count += 1
        if self._count == 1:
            self._notify(True)

    def release(self) -> None:
        if self._count == 0:
            logger.warning("Scroll lock released more times than acquired")
            return
        self._count -= 1
        if self._count == 0:
            self._notify(False)

    def _notify(self, locked: bool) -> None:
        for applier in list(self._appliers):
            applier(locked)


PAGE_SCROLL_LOCK = ScrollLock()
