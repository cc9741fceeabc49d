"""
Drawer registry
===============

Discovers size guide triggers inside a widget tree and builds one drawer per
section. Calling ``init_size_guide_drawers`` again on the same tree is safe:
sections that already own a drawer are skipped.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from PySide6.QtWidgets import QAbstractButton, QWidget
from loguru import logger

from ..config import DEFAULT_PANEL_CONFIG, PanelConfig
from ..controllers.base import Fetcher, Scheduler
from ..services.scroll_lock import ScrollLock
from ..views.panels.size_guide_drawer import TRIGGER_PROPERTY, SizeGuideDrawer, trigger_spec_from_widget


class DrawerRegistry:
    """Keeps the drawers created for a host window, keyed by section id."""

    def __init__(
        self,
        host: QWidget,
        fetcher: Fetcher,
        scheduler: Scheduler | None = None,
        scroll_lock: ScrollLock | None = None,
        config: PanelConfig | None = None,
    ):
        self.host = host
        self.fetcher = fetcher
        self.scheduler = scheduler
        self.scroll_lock = scroll_lock
        self.config = config or DEFAULT_PANEL_CONFIG
        self._drawers: Dict[str, SizeGuideDrawer] = {}

    @property
    def drawers(self) -> Dict[str, SizeGuideDrawer]:
        return dict(self._drawers)

    def get(self, section_id: str) -> Optional[SizeGuideDrawer]:
        return self._drawers.get(section_id)

    def find_triggers(self, root: QWidget) -> List[QAbstractButton]:
        return [
            button
            for button in root.findChildren(QAbstractButton)
            if button.property(TRIGGER_PROPERTY)
        ]

    def scan(self, root: QWidget | None = None) -> List[SizeGuideDrawer]:
        """Create drawers for triggers not seen yet; returns the new ones."""
        created: List[SizeGuideDrawer] = []
        for trigger in self.find_triggers(root or self.host):
            spec = trigger_spec_from_widget(trigger, self.config)
            if spec.section_id in self._drawers:
                continue
            drawer = SizeGuideDrawer(
                trigger,
                self.host,
                self.fetcher,
                scheduler=self.scheduler,
                scroll_lock=self.scroll_lock,
                config=self.config,
                spec=spec,
            )
            self._drawers[spec.section_id] = drawer
            created.append(drawer)
            logger.info(f"Size guide drawer ready for section {spec.section_id} ({spec.document_type})")
        return created

    def dispose(self) -> None:
        for drawer in self._drawers.values():
            drawer.dispose()
        self._drawers.clear()


def init_size_guide_drawers(
    host: QWidget,
    fetcher: Fetcher,
    scheduler: Scheduler | None = None,
    registry: DrawerRegistry | None = None,
) -> DrawerRegistry:
    """Scan ``host`` for triggers and attach a drawer to each new section."""
    registry = registry or DrawerRegistry(host, fetcher, scheduler=scheduler)
    registry.scan()
    return registry
