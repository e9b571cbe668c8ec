"""Observability: in-process counters and timers, summarized via structlog."""

import threading
import time
from contextlib import contextmanager
from typing import Any

import structlog

logger = structlog.get_logger().bind(source="observability")


class Metrics:
    """Simple dict-based metrics collector for counters and timers.

    Safe to share between request threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: dict[str, int] = {}
        self._timers: dict[str, list[float]] = {}

    def counter(self, name: str, value: int = 1):
        """Increment a counter by the given value."""
        with self._lock:
            self._counters[name] = self._counters.get(name, 0) + value

    def count(self, name: str) -> int:
        return self._counters.get(name, 0)

    @contextmanager
    def timer(self, name: str):
        """Context manager to time an operation and store duration."""
        start = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start
            with self._lock:
                self._timers.setdefault(name, []).append(duration)

    def summary(self) -> dict[str, Any]:
        """Return a summary of all collected metrics."""
        with self._lock:
            counters = dict(self._counters)
            timers = {name: list(durations) for name, durations in self._timers.items()}

        timer_summary = {}
        for name, durations in timers.items():
            timer_summary[name] = {
                "count": len(durations),
                "total": sum(durations),
                "avg": sum(durations) / len(durations),
                "max": max(durations),
            }
        return {"counters": counters, "timers": timer_summary}

    def reset(self):
        """Clear all metrics."""
        with self._lock:
            self._counters.clear()
            self._timers.clear()


# Module-level singleton
metrics = Metrics()


def log_run_summary():
    """Log the current metrics summary via structlog."""
    logger.info("run_summary", **metrics.summary())
