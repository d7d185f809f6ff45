"""
Tier resolution - maps the permissions an actor holds to scan settings.

Tiers are walked in configuration order. Among the tiers the actor holds,
the highest priority wins; on equal priority the tier declared later wins,
because the comparison is ``>=``. That tie-break is relied on by existing
configurations and must not be tightened to ``>``.
"""

import math
from collections.abc import Callable, Collection, Iterable

from ..value_objects.scan_settings import EffectiveSettings, Tier


def resolve_settings(
    held_permissions: Collection[str],
    tiers: Iterable[Tier],
    defaults: EffectiveSettings,
) -> EffectiveSettings:
    """
    Resolve the effective radius and cooldown for an actor.

    Args:
        held_permissions: Permission keys the actor holds
        tiers: Tiers in configuration order
        defaults: Settings used when no tier matches

    Returns:
        EffectiveSettings of the winning tier, or ``defaults``
    """
    best_priority = -math.inf
    result = defaults

    for tier in tiers:
        if not tier.enabled or tier.permission not in held_permissions:
            continue
        if tier.priority >= best_priority:
            best_priority = tier.priority
            result = EffectiveSettings(radius=tier.scan_radius, cooldown_seconds=tier.cooldown_seconds)

    return result


def held_tier_permissions(
    actor_id: str, tiers: Iterable[Tier], has_permission: Callable[[str, str], bool]
) -> set[str]:
    """Collect the tier permission keys ``actor_id`` holds via ``has_permission``."""
    return {t.permission for t in tiers if t.enabled and has_permission(actor_id, t.permission)}
