"""
Actor entity - a connected participant in the live session.

Actors are owned by the host's actor directory. The scanner only ever reads
snapshots of them, which is why the entity is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..value_objects.position import Position

NO_TEAM = 0


@dataclass(frozen=True)
class Actor:
    """Snapshot of one actor's identity, position and status flags."""

    id: str
    display_name: str = ""
    position: Position = field(default_factory=Position)
    team_id: int = NO_TEAM
    is_admin: bool = False
    auth_level: int = 0
    is_npc: bool = False
    is_connected: bool = True
    is_alive: bool = True
    is_sleeping: bool = False
    in_safezone: bool = False

    @property
    def is_privileged(self) -> bool:
        """Explicit admin flag or an elevated connection authorization level."""
        return self.is_admin or self.auth_level >= 1

    def is_teammate_of(self, other: Actor | None) -> bool:
        if other is None:
            return False
        return self.team_id != NO_TEAM and self.team_id == other.team_id
