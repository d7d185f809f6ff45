"""
Collaborator interfaces consumed by the scanner.

These are the seams to the host: permission lookups, the live actor
directory, deferred callbacks, replies and log destinations.
"""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from ..entities.actor import Actor


@runtime_checkable
class PermissionChecker(Protocol):
    """Answers whether an actor holds a permission key."""

    def has_permission(self, actor_id: str, permission: str) -> bool: ...


@runtime_checkable
class ActorDirectory(Protocol):
    """Read access to the currently active actors."""

    def snapshot(self) -> Sequence[Actor]:
        """All active actors, in the directory's deterministic order."""
        ...

    def find_by_id(self, actor_id: str) -> Actor | None: ...

    def find_by_name_fragment(self, text: str) -> Actor | None:
        """First actor whose display name contains ``text``, ignoring case."""
        ...


@runtime_checkable
class ScheduledHandle(Protocol):
    """Handle to a pending one-shot callback."""

    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    """Fires a callback once after a delay."""

    def schedule_once(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledHandle: ...


@runtime_checkable
class Notifier(Protocol):
    """Delivers a reply to an actor outside of a command's response."""

    def send(self, actor_id: str, message: str) -> None: ...


@runtime_checkable
class ConsoleSink(Protocol):
    """Operator console."""

    def write(self, line: str) -> None: ...


@runtime_checkable
class FileSink(Protocol):
    """Named, append-only log files."""

    def append(self, destination: str, line: str) -> None: ...
