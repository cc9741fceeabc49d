#!/usr/bin/env python3
"""
Size Guide - Démo du tiroir
===========================

Fenêtre produit minimale avec un bouton "Size Guide" qui ouvre le tiroir et
charge le guide depuis l'API Storefront.
"""

import datetime
import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QPushButton, QScrollArea, QVBoxLayout, QWidget

from sizeguide.config import DEFAULT_REDACTION_CONFIG, PanelConfig, load_storefront_config
from sizeguide.lifecycle import DrawerRegistry
from sizeguide.logging.handlers import DEFAULT_FORMAT, create_console_handler, create_utf8_file_handler
from sizeguide.logging.safe_logger import get_safe_logger
from sizeguide.services.scroll_lock import PAGE_SCROLL_LOCK
from sizeguide.services.storefront_client import StorefrontClient
from sizeguide.views.panels import scroll_area_lock_applier
from sizeguide.workers import QtFetcher, QtScheduler

LOG_DIR = Path("logs")

logger = get_safe_logger(__name__, cfg=DEFAULT_REDACTION_CONFIG)


def setup_logging() -> None:
    """Installe les handlers fichier + console sur le logger racine."""
    process_id = os.getpid()
    main_log = LOG_DIR / f"sizeguide_{process_id}.log"
    error_log = LOG_DIR / f"errors_{datetime.datetime.now().strftime('%Y%m%d')}_{process_id}.log"

    root_logger = logging.getLogger()
    root_logger.addHandler(create_utf8_file_handler(main_log, level=logging.DEBUG))
    root_logger.addHandler(
        create_utf8_file_handler(error_log, level=logging.ERROR, max_bytes=5 * 1024 * 1024, backup_count=3)
    )
    root_logger.addHandler(create_console_handler(level=logging.INFO, fmt=DEFAULT_FORMAT))
    root_logger.setLevel(logging.INFO)

    print(f"[LOGS] Log principal: {main_log}")
    print(f"[LOGS] Erreurs du jour: {error_log}")


class ProductWindow(QMainWindow):
    """Page produit factice portant un déclencheur de guide des tailles."""

    def __init__(self, section_id: str = "main-product"):
        super().__init__()
        self.setWindowTitle("Size Guide Demo")
        self.resize(960, 680)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        page = QWidget()
        layout = QVBoxLayout(page)

        layout.addWidget(QLabel("<h1>Classic Tee</h1><p>100% organic cotton.</p>"))

        self.trigger = QPushButton("Size Guide")
        self.trigger.setObjectName(f"SizeGuideTrigger-{section_id}")
        self.trigger.setProperty("sizeGuideTrigger", True)
        self.trigger.setProperty("sectionId", section_id)
        layout.addWidget(self.trigger)

        for index in range(40):
            layout.addWidget(QLabel(f"Product detail line {index + 1}"))

        self.scroll_area.setWidget(page)
        self.setCentralWidget(self.scroll_area)


def main() -> int:
    """Point d'entrée principal."""
    try:
        setup_logging()
        print(f"[INFO] Demarrage Size Guide demo (PID: {os.getpid()})")

        app = QApplication(sys.argv)
        app.setApplicationName("Size Guide Demo")
        app.setQuitOnLastWindowClosed(True)

        settings = Path(os.environ.get("SIZEGUIDE_SETTINGS", "settings.yaml"))
        client = StorefrontClient(load_storefront_config(settings))
        if not client.config.is_configured():
            logger.warning("Storefront credentials missing: the drawer will show an error")

        window = ProductWindow()
        applier = scroll_area_lock_applier(window.scroll_area)
        PAGE_SCROLL_LOCK.add_applier(applier)

        fetcher = QtFetcher(client)
        registry = DrawerRegistry(window.centralWidget(), fetcher, scheduler=QtScheduler(), config=PanelConfig.from_env())
        registry.scan(window)
        window.show()

        exit_code = app.exec()

        registry.dispose()
        fetcher.wait_for_all()
        PAGE_SCROLL_LOCK.remove_applier(applier)
        logger.info("Application fermee avec le code: {}", exit_code)
        return exit_code

    except KeyboardInterrupt:
        logger.info("Application interrompue par l'utilisateur")
        return 0
    except Exception as e:
        logger.exception("Erreur fatale: {}", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
