"""
Domain Layer - Pure Scan Logic

This layer contains:
- Entities: Actor snapshots read from the session
- Value Objects: Immutable positions
- Services: Tier resolution, cooldown gating, filtering and scanning

No external dependencies allowed in this layer.
"""
