"""One-shot callback scheduling."""

from .timer_scheduler import TimerHandle, TimerScheduler

__all__ = ["TimerHandle", "TimerScheduler"]
