"""Monotonic clock backed by ``time.monotonic``."""

import time


class MonotonicClock:
    """Clock that never goes backwards when the system time is changed."""

    def now(self) -> float:
        return time.monotonic()
