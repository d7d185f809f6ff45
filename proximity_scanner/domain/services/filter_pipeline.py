"""
Filter pipeline - decides whether a scan candidate counts as detected.

Absent, disconnected and self candidates are always excluded. The remaining
exclusions are toggled independently by FilterConfig and AND-combined, so
their order only matters for readability.
"""

from ..entities.actor import Actor
from ..value_objects.scan_settings import FilterConfig


def passes_filters(candidate: Actor | None, context: Actor | None, config: FilterConfig) -> bool:
    """
    Check a candidate against the exclusion rules.

    Args:
        candidate: Actor being considered
        context: Actor the scan is performed for; never counts itself
        config: Which optional exclusions are enabled

    Returns:
        True if the candidate counts toward detection
    """
    if candidate is None or not candidate.is_connected:
        return False
    if context is not None and candidate.id == context.id:
        return False

    if config.ignore_dead and not candidate.is_alive:
        return False
    if config.ignore_sleeping and candidate.is_sleeping:
        return False
    if config.ignore_npc and candidate.is_npc:
        return False
    if config.ignore_admins and candidate.is_privileged:
        return False
    if config.ignore_teammates and context is not None and context.is_teammate_of(candidate):
        return False
    if config.ignore_safezone and candidate.in_safezone:
        return False

    return True
