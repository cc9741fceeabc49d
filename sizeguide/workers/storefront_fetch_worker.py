"""
Storefront Fetch Worker
=======================

Runs the Storefront request off the GUI thread and hands the outcome back to
the panel controller through Qt signals.
"""

from typing import Callable, Dict

from PySide6.QtCore import QObject, QThread, QTimer, Signal, Slot
from loguru import logger

from ..controllers.base import FetchCallback, FetchRequest, FetchResult
from ..services.errors import SizeGuideError
from ..services.storefront_client import StorefrontClient


class StorefrontFetchWorker(QThread):
    """Worker qui récupère les metaobjects en arrière-plan."""

    fetch_finished = Signal(object, object)  # worker, FetchResult

    def __init__(self, client: StorefrontClient, request: FetchRequest):
        super().__init__()
        self.client = client
        self.request = request

    def run(self):
        """Lance la requête."""
        try:
            documents = self.client.fetch_metaobjects(self.request.document_type, self.request.limit)
            result = FetchResult.ok(documents)
        except SizeGuideError as e:
            logger.warning(f"Size guide fetch failed ({e.__class__.__name__}): {e}")
            result = FetchResult.failed(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error fetching {self.request.document_type}: {e}")
            result = FetchResult.failed(str(e))
        self.fetch_finished.emit(self, result)


class QtFetcher(QObject):
    """Fetcher that runs each request on a StorefrontFetchWorker."""

    def __init__(self, client: StorefrontClient, parent: QObject | None = None):
        super().__init__(parent)
        self.client = client
        self._callbacks: Dict[StorefrontFetchWorker, FetchCallback] = {}

    def fetch(self, request: FetchRequest, callback: FetchCallback) -> None:
        worker = StorefrontFetchWorker(self.client, request)
        self._callbacks[worker] = callback
        # Slots on this GUI-thread object receive the queued signal
        worker.fetch_finished.connect(self._on_fetch_finished)
        worker.finished.connect(self._on_worker_stopped)
        worker.start()

    @Slot(object, object)
    def _on_fetch_finished(self, worker: StorefrontFetchWorker, result: FetchResult) -> None:
        callback = self._callbacks.get(worker)
        if callback is None:
            return
        logger.debug(f"Fetch finished for {worker.request.document_type} (error={result.error!r})")
        callback(result)

    @Slot()
    def _on_worker_stopped(self) -> None:
        worker = self.sender()
        if isinstance(worker, StorefrontFetchWorker):
            self._callbacks.pop(worker, None)
            worker.deleteLater()

    def wait_for_all(self, timeout_ms: int = 5000) -> None:
        """Block until running workers finish (used at shutdown)."""
        for worker in list(self._callbacks):
            worker.wait(timeout_ms)


class QtScheduler:
    """Scheduler backed by QTimer.singleShot."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        QTimer.singleShot(max(0, int(delay_ms)), callback)
