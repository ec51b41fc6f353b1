"""
Tests for the null and capture backends.
"""

import threading

import pytest
from ff_clog import CaptureBackend, InvalidConfigError, Level, LoggerConfig, NullBackend


def test_null_backend_does_nothing():
    """Test that NullBackend methods are no-ops."""
    backend = NullBackend()
    backend.init(LoggerConfig(level="debug"))

    backend.debug(None, "Debug message")
    backend.info(None, "Info message %d", 1)
    backend.warn(None, "Warn message")
    backend.fatal(None, "Fatal message")
    backend.set_level("warn")
    backend.set_skip(2)
    backend.reopen()
    backend.close()
    backend.close()


def test_null_backend_requires_config():
    with pytest.raises(InvalidConfigError):
        NullBackend().init(None)


def test_null_backend_repr():
    assert repr(NullBackend()) == "NullBackend()"


class TestCaptureBackend:
    """Test the CaptureBackend used in tests."""

    def test_captures_entries(self, capture):
        capture.info({"traceId": "t1"}, "user %s logged in", "ana")
        capture.warn(None, "slow")

        entries = capture.entries
        assert len(entries) == 2
        assert entries[0]["event"] == "user ana logged in"
        assert entries[0]["level"] is Level.INFO
        assert entries[0]["trace_id"] == "t1"
        assert entries[0]["service"] == "test_service"
        assert "ctx" not in entries[0]
        assert entries[1]["level"] is Level.WARN
        assert capture.messages == ["user ana logged in", "slow"]

    def test_clear(self, capture):
        capture.debug(None, "one")
        capture.clear()

        assert capture.entries == []

    def test_clear_waits_for_state_lock(self, capture):
        """clear is serialized with reopen, close and emits."""
        capture.debug(None, "one")
        cleared = threading.Event()

        def clear():
            capture.clear()
            cleared.set()

        with capture._state_lock:
            t = threading.Thread(target=clear)
            t.start()
            assert cleared.wait(0.1) is False

        t.join()
        assert cleared.is_set()
        assert capture.entries == []

    @pytest.mark.parametrize("threshold", list(Level))
    def test_threshold_filtering(self, threshold):
        """Calls below the threshold are dropped, calls at or above are kept."""
        backend = CaptureBackend()
        backend.init(LoggerConfig(level=threshold.name.lower()))

        backend.debug(None, "debug")
        backend.info(None, "info")
        backend.warn(None, "warn")
        backend.fatal(None, "fatal")

        emitted = [Level.DEBUG, Level.INFO, Level.WARN, Level.FATAL]
        expected = [lvl.name.lower() for lvl in emitted if lvl >= threshold]
        assert backend.messages == expected
        for lvl in emitted:
            assert backend.enabled_for(lvl) is (lvl >= threshold)

    def test_set_level_at_runtime(self, capture):
        capture.set_level("fatal")
        capture.warn(None, "dropped")
        capture.fatal(None, "kept")

        assert capture.messages == ["kept"]

    def test_callsite_with_direct_skip(self):
        backend = CaptureBackend(skip=3)
        backend.init(LoggerConfig(level="debug"))

        backend.info(None, "here")

        entry = backend.entries[0]
        assert entry["func_name"].endswith("test_callsite_with_direct_skip")
        assert entry["filename"].endswith("test_null.py")

    def test_reopen_and_close_tracked(self, capture):
        capture.reopen()
        capture.reopen()
        capture.close()
        capture.close()

        assert capture.reopen_count == 2
        assert capture.closed is True