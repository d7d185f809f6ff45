"""Position value object for representing world coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Position:
    """Immutable 3D world coordinate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Position]

    def distance_to(self, other: Position) -> float:
        """Straight-line distance to another position."""
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"({self.x:.1f},{self.y:.1f},{self.z:.1f})"


Position.ZERO = Position()
