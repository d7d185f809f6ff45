"""Value objects describing how a scan is parameterised."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tier:
    """
    Permission-gated bundle of scan radius and cooldown.

    An empty permission key marks the tier as disabled; it is never matched.
    """

    permission: str = ""
    scan_radius: float = 100.0
    cooldown_seconds: float = 600.0
    priority: int = 0

    def __post_init__(self) -> None:
        if self.scan_radius <= 0:
            raise ValueError(f"Tier scan radius must be positive: {self.scan_radius}")
        if self.cooldown_seconds < 0:
            raise ValueError(f"Tier cooldown must be non-negative: {self.cooldown_seconds}")

    @property
    def enabled(self) -> bool:
        return bool(self.permission)


@dataclass(frozen=True)
class EffectiveSettings:
    """Radius and cooldown resolved for one request."""

    radius: float
    cooldown_seconds: float


@dataclass(frozen=True)
class FilterConfig:
    """Independent toggles for excluding candidates from detection."""

    ignore_teammates: bool = True
    ignore_admins: bool = True
    ignore_safezone: bool = True
    ignore_sleeping: bool = True
    ignore_dead: bool = True
    ignore_npc: bool = True
