"""Domain clock interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Monotonic time source, immune to wall-clock adjustments."""

    def now(self) -> float:
        """Return monotonic seconds."""
        ...
