"""
Cooldown tracking - per-actor gate between successful scans.

Timestamps come from an injected monotonic clock, so wall-clock adjustments
on the host never shorten or extend a cooldown. Entries live until
``clear()`` is called at shutdown; nothing is persisted.
"""

import threading

from ..interfaces.clock import Clock


class CooldownTracker:
    """Maps actor id to the monotonic time of its last successful scan."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._last_use: dict[str, float] = {}
        # Reentrant so callers can hold it across check-then-record
        self.lock = threading.RLock()

    def is_on_cooldown(self, actor_id: str, cooldown_seconds: float) -> bool:
        with self.lock:
            last = self._last_use.get(actor_id)
            if last is None:
                return False
            return self._clock.now() - last < cooldown_seconds

    def remaining(self, actor_id: str, cooldown_seconds: float) -> float:
        """Seconds left before ``actor_id`` may scan again, never negative."""
        with self.lock:
            last = self._last_use.get(actor_id)
            if last is None:
                return 0.0
            return max(0.0, cooldown_seconds - (self._clock.now() - last))

    def record_use(self, actor_id: str) -> None:
        with self.lock:
            self._last_use[actor_id] = self._clock.now()

    def last_use(self, actor_id: str) -> float | None:
        with self.lock:
            return self._last_use.get(actor_id)

    def clear(self) -> None:
        with self.lock:
            self._last_use.clear()

    def __len__(self) -> int:
        return len(self._last_use)

    def __contains__(self, actor_id: object) -> bool:
        return actor_id in self._last_use
