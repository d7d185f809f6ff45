"""
Domain-level exceptions for the proximity scanner.

Every exception here is recoverable and user-facing. They are raised inside
the use cases and converted into replies at the command boundary; none of
them is allowed to escape the service.
"""

from typing import Any


class ScannerException(Exception):
    """Base exception for all scanner errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class PermissionDenied(ScannerException):
    """Raised when an actor lacks a permission required by the operation."""

    def __init__(self, permission: str, actor_id: str | None = None) -> None:
        super().__init__(
            f"Actor {actor_id or 'unknown'} lacks permission {permission}",
            details={"permission": permission, "actor_id": actor_id},
        )
        self.permission = permission
        self.actor_id = actor_id


class OnCooldown(ScannerException):
    """Raised when the cooldown gate for an actor has not expired yet."""

    def __init__(self, actor_id: str, remaining_seconds: float) -> None:
        super().__init__(
            f"Actor {actor_id} is on cooldown for another {remaining_seconds:.1f}s",
            details={"actor_id": actor_id, "remaining_seconds": remaining_seconds},
        )
        self.actor_id = actor_id
        self.remaining_seconds = remaining_seconds


class TargetNotFound(ScannerException):
    """Raised when an id or name lookup found no online actor."""

    def __init__(self, query: str) -> None:
        super().__init__(f"No online actor matches '{query}'", details={"query": query})
        self.query = query


class InvalidArgument(ScannerException):
    """Raised when a required command argument is missing or unusable."""

    def __init__(self, usage: str, argument: str | None = None) -> None:
        super().__init__(usage, details={"argument": argument} if argument else None)
        self.usage = usage
        self.argument = argument
