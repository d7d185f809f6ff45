"""Scan log interface used by the use cases to audit each scan."""

from typing import Protocol, runtime_checkable

from proximity_scanner.domain.entities.actor import Actor


@runtime_checkable
class ScanLog(Protocol):
    """Receives one record per completed scan. Must never raise."""

    def record(
        self,
        actor: Actor | None,
        radius: float,
        cooldown_seconds: float,
        found: bool,
        count: int,
        mode: str,
    ) -> None: ...
