"""
In-memory actor directory and permission store.

Used by hosts that push actor snapshots into the scanner, and by tests.
Iteration order is insertion order, which makes name-fragment lookups
deterministic.
"""

import threading
from collections import defaultdict

from proximity_scanner.domain.entities.actor import Actor


class InMemoryActorDirectory:
    """Active actors keyed by id."""

    def __init__(self, actors: list[Actor] | None = None) -> None:
        self._actors: dict[str, Actor] = {}
        self._lock = threading.RLock()
        for actor in actors or []:
            self.upsert(actor)

    def upsert(self, actor: Actor) -> None:
        """Add an actor or replace its snapshot, keeping its original order."""
        with self._lock:
            self._actors[actor.id] = actor

    def remove(self, actor_id: str) -> Actor | None:
        with self._lock:
            return self._actors.pop(actor_id, None)

    def clear(self) -> None:
        with self._lock:
            self._actors.clear()

    def snapshot(self) -> list[Actor]:
        with self._lock:
            return list(self._actors.values())

    def find_by_id(self, actor_id: str) -> Actor | None:
        with self._lock:
            return self._actors.get(actor_id)

    def find_by_name_fragment(self, text: str) -> Actor | None:
        needle = text.lower()
        with self._lock:
            for actor in self._actors.values():
                if actor.display_name and needle in actor.display_name.lower():
                    return actor
        return None

    def __len__(self) -> int:
        return len(self._actors)


class InMemoryPermissionStore:
    """Permission keys granted per actor."""

    def __init__(self) -> None:
        self._grants: dict[str, set[str]] = defaultdict(set)
        self._lock = threading.RLock()

    def grant(self, actor_id: str, *permissions: str) -> None:
        with self._lock:
            self._grants[actor_id].update(permissions)

    def revoke(self, actor_id: str, *permissions: str) -> None:
        with self._lock:
            self._grants[actor_id].difference_update(permissions)

    def has_permission(self, actor_id: str, permission: str) -> bool:
        with self._lock:
            return permission in self._grants.get(actor_id, ())

    def permissions_of(self, actor_id: str) -> set[str]:
        with self._lock:
            return set(self._grants.get(actor_id, ()))
