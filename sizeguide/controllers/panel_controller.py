"""
Panel controller: open/close state machine of one size guide drawer.

Phases::

    CLOSED --open()--> OPENING --(sync)--> OPEN --close()--> CLOSING --(hide delay)--> CLOSED

While OPEN the drawer shows one content state (loading, empty, error or
content). Data is fetched at most once per instance: a successful fetch, empty
or not, is cached; a failed fetch is retried on the next open(). The fetch
cache is a single status enum so "fetching" and "cached" can never hold at the
same time, which also guarantees at most one request in flight.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from ..config import DEFAULT_PANEL_CONFIG, DEFAULT_REDACTION_CONFIG, PanelConfig
from ..logging.safe_logger import get_safe_logger
from ..models.field_set import FieldSet
from ..services.scroll_lock import PAGE_SCROLL_LOCK, ScrollLock
from ..utils.content_markup import content_markup, empty_markup, error_markup, loading_markup
from ..utils.field_parser import parse_fields
from .base import FetchRequest, FetchResult, Fetcher, PanelView, Scheduler
from .focus import ESCAPE_KEY, KeyStroke, trap_tab

logger = get_safe_logger(__name__, cfg=DEFAULT_REDACTION_CONFIG)

__all__ = [
    "ContentKind",
    "ContentState",
    "FetchCache",
    "FetchStatus",
    "PanelController",
    "PanelPhase",
    "TriggerSpec",
]


class PanelPhase(str, Enum):
    CLOSED = "closed"
    OPENING = "opening"
    OPEN = "open"
    CLOSING = "closing"


class ContentKind(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    ERROR = "error"
    CONTENT = "content"


class FetchStatus(str, Enum):
    NOT_FETCHED = "not_fetched"
    FETCHING = "fetching"
    CACHED = "cached"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ContentState:
    kind: ContentKind
    message: str = ""
    fields: Optional[FieldSet] = None

    @classmethod
    def loading(cls) -> "ContentState":
        return cls(ContentKind.LOADING)

    @classmethod
    def empty(cls, message: str) -> "ContentState":
        return cls(ContentKind.EMPTY, message=message)

    @classmethod
    def error(cls, message: str) -> "ContentState":
        return cls(ContentKind.ERROR, message=message)

    @classmethod
    def content(cls, fields: FieldSet) -> "ContentState":
        return cls(ContentKind.CONTENT, fields=fields)


@dataclass(frozen=True, slots=True)
class FetchCache:
    status: FetchStatus = FetchStatus.NOT_FETCHED

    # Only meaningful when CACHED; None records an empty result
    fields: Optional[FieldSet] = None


@dataclass(frozen=True, slots=True)
class TriggerSpec:
    """What a trigger control declares about the drawer it opens."""

    section_id: str
    document_type: str = DEFAULT_PANEL_CONFIG.document_type
    empty_message: str = DEFAULT_PANEL_CONFIG.empty_message


class PanelController:
    """Pure-Python coordinator driving one drawer through its collaborators."""

    def __init__(
        self,
        trigger: TriggerSpec,
        view: PanelView,
        fetcher: Fetcher,
        scheduler: Scheduler,
        scroll_lock: ScrollLock | None = None,
        config: PanelConfig | None = None,
    ) -> None:
        self.trigger = trigger
        self._view = view
        self._fetcher = fetcher
        self._scheduler = scheduler
        self._scroll_lock = scroll_lock if scroll_lock is not None else PAGE_SCROLL_LOCK
        self._config = config or DEFAULT_PANEL_CONFIG

        self._phase = PanelPhase.CLOSED
        self._content: ContentState | None = None
        self._fetch = FetchCache()
        self._last_focused: Any = None
        self._focusable: Tuple[Any, ...] = ()
        self._holds_scroll_lock = False
        self._open_generation = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def phase(self) -> PanelPhase:
        return self._phase

    @property
    def is_open(self) -> bool:
        return self._phase in (PanelPhase.OPENING, PanelPhase.OPEN)

    @property
    def content(self) -> ContentState | None:
        return self._content

    @property
    def fetch_status(self) -> FetchStatus:
        return self._fetch.status

    @property
    def has_fetched(self) -> bool:
        return self._fetch.status is FetchStatus.CACHED

    @property
    def focusable_elements(self) -> Tuple[Any, ...]:
        return self._focusable

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def open(self) -> None:
        if self._phase is not PanelPhase.CLOSED:
            logger.debug("open() ignored for section {} in phase {}", self.trigger.section_id, self._phase.value)
            return

        self._phase = PanelPhase.OPENING
        self._open_generation += 1
        generation = self._open_generation

        self._last_focused = self._view.active_element()
        self._view.reveal()
        self._view.set_open_style(True)
        self._view.set_expanded(True)
        self._acquire_scroll_lock()
        self._view.attach_key_listeners(self.handle_key)

        status = self._fetch.status
        if status is FetchStatus.CACHED:
            self._present(self._cached_state())
        elif status is FetchStatus.FETCHING:
            self._present(ContentState.loading())
        else:
            self._start_fetch()

        if self._phase is PanelPhase.OPENING:
            self._phase = PanelPhase.OPEN
        logger.info("Size guide drawer opened (section {})", self.trigger.section_id)

        self._scheduler.schedule(
            self._config.focus_delay_ms,
            lambda: self._focus_after_open(generation),
        )

    def close(self) -> None:
        if not self.is_open:
            return

        self._phase = PanelPhase.CLOSING
        self._view.set_open_style(False)
        self._view.set_expanded(False)
        self._release_scroll_lock()
        self._view.detach_key_listeners()

        previous, self._last_focused = self._last_focused, None
        if previous is not None:
            self._view.focus_element(previous)

        generation = self._open_generation
        self._scheduler.schedule(
            self._config.hide_delay_ms,
            lambda: self._finish_close(generation),
        )
        logger.info("Size guide drawer closing (section {})", self.trigger.section_id)

    def handle_key(self, stroke: KeyStroke) -> bool:
        """Key listener installed while open. Returns True when the key was consumed."""
        if not self.is_open:
            return False

        if stroke.key == ESCAPE_KEY:
            self.close()
            return True

        decision = trap_tab(stroke, self._focusable, self._view.active_element())
        if decision.prevent_default:
            self._view.focus_element(decision.refocus)
            return True
        return False

    def refresh_focusable(self) -> None:
        self._focusable = tuple(self._view.focusable_elements())

    def teardown(self) -> None:
        """Release page-level resources when the drawer is removed."""
        if self.is_open:
            self._view.detach_key_listeners()
        self._release_scroll_lock()
        self._phase = PanelPhase.CLOSED
        self._focusable = ()
        self._last_focused = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _focus_after_open(self, generation: int) -> None:
        if generation != self._open_generation or self._phase is not PanelPhase.OPEN:
            return
        self._view.focus_close_control()
        self.refresh_focusable()

    def _finish_close(self, generation: int) -> None:
        if generation != self._open_generation or self._phase is not PanelPhase.CLOSING:
            return
        self._view.hide_panel()
        self._phase = PanelPhase.CLOSED

    def _start_fetch(self) -> None:
        self._fetch = FetchCache(FetchStatus.FETCHING)
        self._present(ContentState.loading())

        request = FetchRequest(document_type=self.trigger.document_type, limit=self._config.fetch_limit)
        logger.debug("Fetching {} for section {}", request.document_type, self.trigger.section_id)
        try:
            self._fetcher.fetch(request, self._on_fetch_complete)
        except Exception as exc:
            logger.exception("Error fetching metaobject data: {}", exc)
            self._on_fetch_complete(FetchResult.failed(str(exc)))

    def _on_fetch_complete(self, result: FetchResult) -> None:
        if self._fetch.status is not FetchStatus.FETCHING:
            logger.warning("Ignoring fetch completion for section {} (no request in flight)", self.trigger.section_id)
            return

        try:
            if result.is_error:
                logger.error("Error fetching metaobject data: {}", result.error)
                self._fetch = FetchCache(FetchStatus.FAILED)
                state = ContentState.error(result.error or "")
            elif not result.documents:
                self._fetch = FetchCache(FetchStatus.CACHED, None)
                state = self._cached_state()
            else:
                fields = parse_fields(result.documents[0].fields)
                self._fetch = FetchCache(FetchStatus.CACHED, fields)
                state = ContentState.content(fields)
        except Exception as exc:
            logger.exception("Error handling metaobject data: {}", exc)
            self._fetch = FetchCache(FetchStatus.FAILED)
            state = ContentState.error(str(exc))

        self._present(state)
        if self.is_open:
            self.refresh_focusable()

    def _cached_state(self) -> ContentState:
        fields = self._fetch.fields
        if fields is None:
            return ContentState.empty(self.trigger.empty_message)
        return ContentState.content(fields)

    def _present(self, state: ContentState) -> None:
        self._content = state
        self._view.set_content_markup(self._markup_for(state))

    def _markup_for(self, state: ContentState) -> str:
        if state.kind is ContentKind.LOADING:
            return loading_markup()
        if state.kind is ContentKind.EMPTY:
            return empty_markup(state.message)
        if state.kind is ContentKind.ERROR:
            return error_markup(state.message)
        return content_markup(state.fields or {}, default_title=self._config.default_title)

    def _acquire_scroll_lock(self) -> None:
        if not self._holds_scroll_lock:
            self._scroll_lock.acquire()
            self._holds_scroll_lock = True

    def _release_scroll_lock(self) -> None:
        if self._holds_scroll_lock:
            self._scroll_lock.release()
            self._holds_scroll_lock = False
