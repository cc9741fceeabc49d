import logging

from sizeguide.services.scroll_lock import ScrollLock


class TestScrollLock:
    def test_appliers_called_on_transitions_only(self):
        lock = ScrollLock()
        calls = []
        lock.add_applier(calls.append)

        lock.acquire()
        lock.acquire()
        lock.release()
        assert calls == [True]
        lock.release()
        assert calls == [True, False]

    def test_late_applier_receives_current_state(self):
        lock = ScrollLock()
        lock.acquire()
        calls = []
        lock.add_applier(calls.append)
        assert calls == [True]

    def test_release_underflow_warns(self, caplog):
        caplog.set_level(logging.WARNING, logger="sizeguide.services.scroll_lock")
        lock = ScrollLock()
        lock.release()
        assert lock.count == 0
        assert "released more times than acquired" in caplog.text

    def test_remove_applier(self):
        lock = ScrollLock()
        calls = []
        lock.add_applier(calls.append)
        lock.remove_applier(calls.append)
        lock.acquire()
        assert calls == []
