"""
Scan engine - counts filtered candidates within a radius of an origin.

A flat linear pass over an in-memory snapshot; no I/O and no early exit,
since the exact count is reported in the scan log.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ..entities.actor import Actor
from ..value_objects.position import Position
from ..value_objects.scan_settings import FilterConfig
from .filter_pipeline import passes_filters


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one proximity scan."""

    found: bool
    count: int
    radius: float
    cooldown_seconds: float = 0.0


def scan(
    origin: Position,
    context: Actor | None,
    radius: float,
    candidates: Iterable[Actor | None],
    filter_config: FilterConfig,
    cooldown_seconds: float = 0.0,
) -> ScanResult:
    """
    Scan ``candidates`` around ``origin``.

    A candidate exactly ``radius`` away is counted.

    Args:
        origin: Centre of the scan
        context: Actor the scan is performed for (excluded from results)
        radius: Inclusive detection radius
        candidates: Snapshot of active actors
        filter_config: Exclusions to apply
        cooldown_seconds: Cooldown in effect, carried through for logging

    Returns:
        ScanResult with the detection count
    """
    count = 0
    for candidate in candidates:
        if not passes_filters(candidate, context, filter_config):
            continue
        if origin.distance_to(candidate.position) <= radius:
            count += 1

    return ScanResult(found=count > 0, count=count, radius=radius, cooldown_seconds=cooldown_seconds)
