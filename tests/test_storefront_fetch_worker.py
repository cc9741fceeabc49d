import time

import pytest

pytest.importorskip("PySide6")

from sizeguide.controllers.base import FetchRequest  # noqa: E402
from sizeguide.schemas.storefront_schema import Metaobject  # noqa: E402
from sizeguide.services.errors import TransportError  # noqa: E402
from sizeguide.workers.storefront_fetch_worker import (  # noqa: E402
    QtFetcher,
    QtScheduler,
    StorefrontFetchWorker,
)


class StubClient:
    def __init__(self, documents=None, error=None):
        self.documents = documents or []
        self.error = error
        self.calls = []

    def fetch_metaobjects(self, document_type, limit=1):
        self.calls.append((document_type, limit))
        if self.error is not None:
            raise self.error
        return self.documents


def drive(qapp, condition, timeout_s=5.0):
    deadline = time.monotonic() + timeout_s
    while not condition() and time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.01)
    qapp.processEvents()
    return condition()


def run_inline(client):
    worker = StorefrontFetchWorker(client, FetchRequest("size_guide", 1))
    results = []
    worker.fetch_finished.connect(lambda w, result: results.append(result))
    worker.run()
    return results


class TestStorefrontFetchWorker:
    def test_success(self, qapp):
        doc = Metaobject(handle="guide")
        results = run_inline(StubClient(documents=[doc]))
        assert len(results) == 1
        assert results[0].error is None
        assert results[0].documents == [doc]

    def test_size_guide_error_message_kept(self, qapp):
        results = run_inline(StubClient(error=TransportError("HTTP error! status: 503")))
        assert results[0].is_error
        assert results[0].error == "HTTP error! status: 503"

    def test_unexpected_exception_becomes_failure(self, qapp):
        results = run_inline(StubClient(error=KeyError("edges")))
        assert results[0].is_error
        assert "edges" in results[0].error


class TestQtFetcher:
    def test_callback_runs_once_on_gui_thread(self, qapp):
        client = StubClient(documents=[])
        fetcher = QtFetcher(client)
        results = []

        fetcher.fetch(FetchRequest("size_guide", 1), results.append)

        assert drive(qapp, lambda: results and not fetcher._callbacks)
        assert len(results) == 1
        assert results[0].documents == []
        assert results[0].error is None
        assert client.calls == [("size_guide", 1)]

    def test_failure_delivered(self, qapp):
        fetcher = QtFetcher(StubClient(error=TransportError("offline")))
        results = []

        fetcher.fetch(FetchRequest("size_guide", 1), results.append)

        assert drive(qapp, lambda: results and not fetcher._callbacks)
        assert [r.error for r in results] == ["offline"]

    def test_wait_for_all(self, qapp):
        fetcher = QtFetcher(StubClient())
        results = []
        fetcher.fetch(FetchRequest("size_guide", 1), results.append)
        fetcher.wait_for_all()
        assert drive(qapp, lambda: results and not fetcher._callbacks)


class TestQtScheduler:
    def test_runs_callback_after_delay(self, qapp):
        fired = []
        QtScheduler().schedule(0, lambda: fired.append(True))
        assert drive(qapp, lambda: fired)
        assert fired == [True]

    def test_negative_delay_clamped(self, qapp):
        fired = []
        QtScheduler().schedule(-5, lambda: fired.append(True))
        assert drive(qapp, lambda: fired)
