"""
Collaborator contracts for the panel controller.

These are pure-Python protocols so the state machine can be exercised in unit
tests without importing PySide6. The Qt drawer, the QThread fetcher and the
QTimer scheduler implement them in the views/workers packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol, Sequence, runtime_checkable

from ..schemas.storefront_schema import Metaobject
from .focus import KeyStroke

KeyHandler = Callable[[KeyStroke], bool]


@dataclass(frozen=True, slots=True)
class FetchRequest:
    document_type: str
    limit: int = 1


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of one fetch: either documents or an error message."""

    documents: List[Metaobject] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def ok(cls, documents: Sequence[Metaobject]) -> "FetchResult":
        return cls(documents=list(documents))

    @classmethod
    def failed(cls, message: Optional[str]) -> "FetchResult":
        return cls(error="Unknown error" if message is None else message)

    @property
    def is_error(self) -> bool:
        return self.error is not None


FetchCallback = Callable[[FetchResult], None]


@runtime_checkable
class Fetcher(Protocol):
    def fetch(self, request: FetchRequest, callback: FetchCallback) -> None:
        """Start the request; ``callback`` is invoked later on the UI thread."""


@runtime_checkable
class Scheduler(Protocol):
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Run ``callback`` once after ``delay_ms`` on the UI thread."""


@runtime_checkable
class PanelView(Protocol):
    """Side effects the controller applies to the drawer and its trigger."""

    def reveal(self) -> None: ...

    def hide_panel(self) -> None: ...

    def set_open_style(self, is_open: bool) -> None: ...

    def set_expanded(self, expanded: bool) -> None: ...

    def attach_key_listeners(self, handler: KeyHandler) -> None: ...

    def detach_key_listeners(self) -> None: ...

    def active_element(self) -> Any: ...

    def focus_element(self, element: Any) -> None: ...

    def focus_close_control(self) -> None: ...

    def set_content_markup(self, markup: str) -> None: ...

    def focusable_elements(self) -> Sequence[Any]: ...
