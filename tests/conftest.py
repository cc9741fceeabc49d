import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


class FakeScheduler:
    """Collects scheduled callbacks; tests run them explicitly."""

    def __init__(self):
        self.pending = []

    def schedule(self, delay_ms, callback):
        self.pending.append((delay_ms, callback))

    def run_all(self):
        pending, self.pending = self.pending, []
        for _, callback in pending:
            callback()


class FakeFetcher:
    """Records requests; completion is delivered by the test."""

    def __init__(self):
        self.requests = []
        self.callbacks = []

    def fetch(self, request, callback):
        self.requests.append(request)
        self.callbacks.append(callback)

    def complete(self, result, index=-1):
        self.callbacks[index](result)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def fetcher():
    return FakeFetcher()
