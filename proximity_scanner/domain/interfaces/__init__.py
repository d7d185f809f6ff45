"""
Domain interfaces for the collaborators the scanner consumes.

The host (game server adapter, tests, ...) provides the implementations;
the domain only defines what it needs from them.
"""

from .clock import Clock
from .collaborators import (
    ActorDirectory,
    ConsoleSink,
    FileSink,
    Notifier,
    PermissionChecker,
    ScheduledHandle,
    Scheduler,
)

__all__ = [
    "ActorDirectory",
    "Clock",
    "ConsoleSink",
    "FileSink",
    "Notifier",
    "PermissionChecker",
    "ScheduledHandle",
    "Scheduler",
]
