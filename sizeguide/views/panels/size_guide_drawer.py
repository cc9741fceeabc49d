"""Size guide drawer: overlay panel opened from a product-page trigger."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtGui import QFont, QKeyEvent
from PySide6.QtWidgets import (
    QAbstractButton,
    QAbstractScrollArea,
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from ...config import DEFAULT_PANEL_CONFIG, PanelConfig
from ...controllers.base import Fetcher, KeyHandler, Scheduler
from ...controllers.focus import ESCAPE_KEY, TAB_KEY, KeyStroke
from ...controllers.panel_controller import PanelController, TriggerSpec
from ...services.scroll_lock import ScrollLock
from ...widgets.focusable import compute_focusable
from ...workers.storefront_fetch_worker import QtScheduler

__all__ = [
    "SizeGuideDrawer",
    "key_stroke_from_event",
    "scroll_area_lock_applier",
    "trigger_spec_from_widget",
]

TRIGGER_PROPERTY = "sizeGuideTrigger"


def trigger_spec_from_widget(trigger: QWidget, config: PanelConfig = DEFAULT_PANEL_CONFIG) -> TriggerSpec:
    """Read the drawer settings carried by a trigger's dynamic properties."""
    section_id = trigger.property("sectionId") or trigger.objectName() or "default"
    return TriggerSpec(
        section_id=str(section_id),
        document_type=str(trigger.property("metaobjectType") or config.document_type),
        empty_message=str(trigger.property("emptyMessage") or config.empty_message),
    )


def key_stroke_from_event(event: QKeyEvent) -> Optional[KeyStroke]:
    key = event.key()
    if key == Qt.Key.Key_Escape:
        return KeyStroke(ESCAPE_KEY)
    if key == Qt.Key.Key_Backtab:
        return KeyStroke(TAB_KEY, shift=True)
    if key == Qt.Key.Key_Tab:
        return KeyStroke(TAB_KEY, shift=bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier))
    return None


def scroll_area_lock_applier(area: QAbstractScrollArea) -> Callable[[bool], None]:
    """Build a ScrollLock applier that freezes ``area`` while locked."""

    def apply(locked: bool) -> None:
        area.verticalScrollBar().setEnabled(not locked)
        area.horizontalScrollBar().setEnabled(not locked)
        area.setProperty("scrollLocked", locked)

    return apply


class _DrawerOverlay(QWidget):
    """Dimmed backdrop; a click anywhere closes the drawer."""

    clicked = Signal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("SizeGuideDrawerOverlay")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet("background-color: rgba(0, 0, 0, 110);")

    def mousePressEvent(self, event) -> None:  # noqa: N802
        self.clicked.emit()
        event.accept()


class _KeyListener(QObject):
    """Application-wide key filter active while the drawer is open."""

    def __init__(self, drawer: "SizeGuideDrawer", handler: KeyHandler):
        super().__init__(drawer)
        self._drawer = drawer
        self._handler = handler

    def eventFilter(self, obj, event) -> bool:  # noqa: N802
        if event.type() != QEvent.Type.KeyPress or not isinstance(obj, QWidget):
            return False
        stroke = key_stroke_from_event(event)
        if stroke is None:
            return False
        # Tab trapping only applies to keys typed inside the drawer
        if stroke.key == TAB_KEY and not (obj is self._drawer or self._drawer.isAncestorOf(obj)):
            return False
        return bool(self._handler(stroke))


class SizeGuideDrawer(QWidget):
    """Overlay drawer covering its host window; implements the PanelView contract."""

    def __init__(
        self,
        trigger: QAbstractButton,
        host: QWidget,
        fetcher: Fetcher,
        scheduler: Scheduler | None = None,
        scroll_lock: ScrollLock | None = None,
        config: PanelConfig | None = None,
        spec: TriggerSpec | None = None,
    ):
        super().__init__(host)
        self.trigger = trigger
        self.config = config or DEFAULT_PANEL_CONFIG
        self.spec = spec or trigger_spec_from_widget(trigger, self.config)
        self.setObjectName(f"SizeGuideDrawer-{self.spec.section_id}")

        self.overlay: _DrawerOverlay | None = None
        self.panel: QFrame | None = None
        self.close_button: QPushButton | None = None
        self.content: QTextBrowser | None = None
        self._key_listener: _KeyListener | None = None

        self._setup_ui()
        self.hide()

        self.controller = PanelController(
            self.spec,
            view=self,
            fetcher=fetcher,
            scheduler=scheduler or QtScheduler(),
            scroll_lock=scroll_lock,
            config=self.config,
        )

        self.trigger.setProperty("ariaExpanded", "false")
        self.trigger.clicked.connect(lambda checked=False: self.controller.open())
        self.close_button.clicked.connect(lambda checked=False: self.controller.close())
        self.overlay.clicked.connect(self.controller.close)
        host.installEventFilter(self)

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------
    def _setup_ui(self) -> None:
        self.overlay = _DrawerOverlay(self)

        self.panel = QFrame(self)
        self.panel.setObjectName("SizeGuideDrawerPanel")
        self.panel.setFixedWidth(420)
        self.panel.setStyleSheet(
            """
            QFrame#SizeGuideDrawerPanel {
                background-color: #ffffff;
                border-left: 1px solid #d0d0d0;
            }
            """
        )

        layout = QVBoxLayout(self.panel)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        header_layout = QHBoxLayout()
        title = QLabel("Size Guide")
        title.setFont(QFont("Arial", 14, QFont.Weight.Bold))
        header_layout.addWidget(title)
        header_layout.addStretch()

        self.close_button = QPushButton("✕")
        self.close_button.setObjectName("SizeGuideDrawerClose")
        self.close_button.setAccessibleName("Close size guide")
        self.close_button.setFixedSize(32, 32)
        header_layout.addWidget(self.close_button)
        layout.addLayout(header_layout)

        self.content = QTextBrowser()
        self.content.setObjectName("SizeGuideDrawerContent")
        self.content.setOpenExternalLinks(True)
        self.content.setAccessibleName("Size guide content")
        layout.addWidget(self.content, 1)

        self._layout_children()

    def _layout_children(self) -> None:
        rect = self.rect()
        self.overlay.setGeometry(rect)
        width = min(self.panel.width(), rect.width())
        self.panel.setGeometry(rect.width() - width, 0, width, rect.height())

    def resizeEvent(self, event) -> None:  # noqa: N802
        super().resizeEvent(event)
        self._layout_children()

    def eventFilter(self, obj, event) -> bool:  # noqa: N802
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self.setGeometry(obj.rect())
        return False

    # ------------------------------------------------------------------
    # PanelView
    # ------------------------------------------------------------------
    def reveal(self) -> None:
        host = self.parentWidget()
        if host is not None:
            self.setGeometry(host.rect())
        self.show()
        self.raise_()

    def hide_panel(self) -> None:
        self.hide()

    def set_open_style(self, is_open: bool) -> None:
        self.setProperty("isOpen", is_open)
        self.style().unpolish(self)
        self.style().polish(self)

    def set_expanded(self, expanded: bool) -> None:
        self.trigger.setProperty("ariaExpanded", "true" if expanded else "false")
        self.trigger.setAccessibleDescription("expanded" if expanded else "collapsed")

    def attach_key_listeners(self, handler: KeyHandler) -> None:
        self.detach_key_listeners()
        app = QApplication.instance()
        if app is None:
            return
        self._key_listener = _KeyListener(self, handler)
        app.installEventFilter(self._key_listener)

    def detach_key_listeners(self) -> None:
        if self._key_listener is None:
            return
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self._key_listener)
        self._key_listener.deleteLater()
        self._key_listener = None

    def active_element(self) -> Any:
        return QApplication.focusWidget()

    def focus_element(self, element: Any) -> None:
        if not isinstance(element, QWidget):
            return
        try:
            element.setFocus(Qt.FocusReason.OtherFocusReason)
        except RuntimeError as e:
            # Widget deleted while the drawer was open
            logger.debug(f"Cannot restore focus: {e}")

    def focus_close_control(self) -> None:
        self.close_button.setFocus(Qt.FocusReason.OtherFocusReason)

    def set_content_markup(self, markup: str) -> None:
        self.content.setHtml(markup)

    def focusable_elements(self) -> List[QWidget]:
        return compute_focusable(self.panel)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def dispose(self) -> None:
        """Detach from the host and release page-level state."""
        self.controller.teardown()
        host = self.parentWidget()
        if host is not None:
            host.removeEventFilter(self)
        logger.debug(f"Drawer {self.objectName()} disposed")
        self.deleteLater()
