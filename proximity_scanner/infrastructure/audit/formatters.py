"""
Scan log formatter.

Builds the single ``key=value`` line recorded for each scan. Field order is
fixed; optional fields are appended at the end in a fixed order too.
"""

from decimal import ROUND_HALF_UP, Decimal

from proximity_scanner.application.config import LogConfig
from proximity_scanner.domain.entities.actor import Actor
from proximity_scanner.domain.value_objects.position import Position

FIELD_DELIMITER = " | "
UNKNOWN_ACTOR_NAME = "unknown"
UNKNOWN_ACTOR_ID = "0"


def format_radius(radius: float) -> str:
    """At most two decimals, trailing zeros dropped (``100``, ``12.5``)."""
    text = f"{radius:.2f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def format_seconds(seconds: float) -> str:
    """Whole seconds, halves rounded away from zero."""
    return str(Decimal(str(seconds)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ScanLineFormatter:
    """Formats scan records according to a LogConfig."""

    def __init__(self, config: LogConfig) -> None:
        self.config = config

    def fields(
        self,
        actor: Actor | None,
        radius: float,
        cooldown_seconds: float,
        found: bool,
        count: int,
        mode: str,
    ) -> list[str]:
        name = actor.display_name if actor is not None else UNKNOWN_ACTOR_NAME
        actor_id = actor.id if actor is not None else UNKNOWN_ACTOR_ID
        position = actor.position if actor is not None else Position.ZERO

        parts = [
            f"mode={mode}",
            f'actor="{name}"',
            f"actor_id={actor_id}",
            f"radius={format_radius(radius)}",
            f"result={'detected' if found else 'clear'}",
        ]
        if cooldown_seconds > 0:
            parts.append(f"cooldown={format_seconds(cooldown_seconds)}s")
        if self.config.include_position:
            parts.append(f"pos={position}")
        if self.config.include_count:
            parts.append(f"count={count}")
        return parts

    def format(
        self,
        actor: Actor | None,
        radius: float,
        cooldown_seconds: float,
        found: bool,
        count: int,
        mode: str,
    ) -> str:
        return FIELD_DELIMITER.join(
            self.fields(actor, radius, cooldown_seconds, found, count, mode)
        )
