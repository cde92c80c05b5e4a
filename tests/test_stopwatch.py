"""Tests for the timing collaborator."""

import logging

from wordsieve._stopwatch import Stopwatch


def _messages(caplog):
    return [r.getMessage() for r in caplog.records]


def test_starts_on_construction(caplog):
    caplog.set_level(logging.INFO, logger="wordsieve.stopwatch")
    sw = Stopwatch("load")
    assert sw.is_started()
    assert "Start timing load" in _messages(caplog)


def test_deferred_start():
    sw = Stopwatch(start=False)
    assert not sw.is_started()
    assert sw.elapsed_ms() == 0.0
    assert sw.stop() is None


def test_stop_returns_elapsed(caplog):
    caplog.set_level(logging.INFO, logger="wordsieve.stopwatch")
    sw = Stopwatch("scan")
    elapsed = sw.stop()
    assert elapsed is not None and elapsed >= 0.0
    assert not sw.is_started()
    assert any(m.startswith("Stop timing scan:") for m in _messages(caplog))


def test_restart_with_new_activity(caplog):
    caplog.set_level(logging.INFO, logger="wordsieve.stopwatch")
    sw = Stopwatch("first")
    sw.stop()
    sw.start("second")
    assert sw.is_started()
    sw.stop()
    assert any(m.startswith("Stop timing second:") for m in _messages(caplog))


def test_show_keeps_running(caplog):
    caplog.set_level(logging.INFO, logger="wordsieve.stopwatch")
    sw = Stopwatch("x")
    sw.show("so far")
    assert sw.is_started()
    assert any(m.startswith("so far:") for m in _messages(caplog))


def test_context_manager():
    with Stopwatch("block", start=False) as sw:
        assert sw.is_started()
    assert not sw.is_started()


def test_custom_logger(caplog):
    log = logging.getLogger("wordsieve.test")
    caplog.set_level(logging.INFO, logger="wordsieve.test")
    Stopwatch("custom", logger=log).stop()
    assert caplog.records
    assert all(r.name == "wordsieve.test" for r in caplog.records)
