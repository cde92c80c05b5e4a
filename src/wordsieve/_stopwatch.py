"""Elapsed-time stopwatch that reports through logging."""

from __future__ import annotations

import logging
import time

_logger = logging.getLogger("wordsieve.stopwatch")


class Stopwatch:
    """Time a named activity.

    Starts on construction unless start=False. Use as a context manager
    to stop on exit.
    """

    __slots__ = ("_activity", "_started_at", "_log")

    def __init__(
        self,
        activity: str = "Stopwatch",
        start: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self._activity = activity
        self._started_at: float | None = None
        self._log = logger if logger is not None else _logger
        if start:
            self.start(activity)

    def is_started(self) -> bool:
        return self._started_at is not None

    def start(self, activity: str | None = None) -> None:
        """(Re)start timing, optionally under a new activity name."""
        if activity is not None:
            self._activity = activity
        self._log.info("Start timing %s", self._activity)
        self._started_at = time.perf_counter()

    def elapsed_ms(self) -> float:
        if self._started_at is None:
            return 0.0
        return (time.perf_counter() - self._started_at) * 1000.0

    def show(self, event: str = "Accumulated time") -> None:
        """Log the time so far and keep running."""
        self._log.info("%s: %d ms", event, self.elapsed_ms())

    def stop(self) -> float | None:
        """Stop timing and return the elapsed ms, or None if not running."""
        if self._started_at is None:
            return None
        elapsed = self.elapsed_ms()
        self._log.info("Stop timing %s: %d ms", self._activity, elapsed)
        self._started_at = None
        return elapsed

    def __enter__(self) -> Stopwatch:
        if not self.is_started():
            self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
