"""In-memory implementations of the actor directory and permission store."""

from .in_memory import InMemoryActorDirectory, InMemoryPermissionStore

__all__ = ["InMemoryActorDirectory", "InMemoryPermissionStore"]
