"""
Thread-based one-shot scheduler.

Each scheduled callback runs on its own daemon ``threading.Timer``. Hosts
with an event loop of their own should provide a Scheduler that posts the
callback back onto that loop instead.
"""

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TimerHandle:
    """Cancellable handle for a scheduled callback."""

    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._timer.finished.is_set() and not self._cancelled

    def cancel(self) -> None:
        # Cancelling a timer that already fired is a no-op
        self._cancelled = True
        self._timer.cancel()


class TimerScheduler:
    """Scheduler implementation using daemon timer threads."""

    def schedule_once(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        if delay_seconds < 0:
            raise ValueError(f"Delay must be non-negative: {delay_seconds}")

        def run() -> None:
            try:
                callback()
            except Exception:
                logger.exception("Scheduled callback failed")

        timer = threading.Timer(delay_seconds, run)
        timer.daemon = True
        timer.start()
        return TimerHandle(timer)
