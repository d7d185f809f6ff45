"""
Scan Use Cases

Orchestrates the two scan commands:

- ``scan``: an actor scans around themselves, gated by their cooldown
- ``scan.for``: an admin runs a test scan from another actor's position,
  without touching anyone's cooldown
"""

from collections.abc import Callable
from dataclasses import dataclass

from proximity_scanner.application.config import PERM_ADMIN, PERM_USE, ScannerConfig
from proximity_scanner.application.interfaces.scan_log import ScanLog
from proximity_scanner.application.messages import SCAN_FOR_USAGE, MessageCatalog
from proximity_scanner.domain.entities.actor import Actor
from proximity_scanner.domain.exceptions import (
    InvalidArgument,
    OnCooldown,
    PermissionDenied,
    TargetNotFound,
)
from proximity_scanner.domain.interfaces.collaborators import ActorDirectory, PermissionChecker
from proximity_scanner.domain.services.cooldown_tracker import CooldownTracker
from proximity_scanner.domain.services.scan_engine import scan
from proximity_scanner.domain.services.tier_resolver import (
    held_tier_permissions,
    resolve_settings,
)
from proximity_scanner.domain.value_objects.scan_settings import EffectiveSettings

from .base import CommandResponse, UseCase, UseCaseRequest

MAX_ACTOR_ID = 2**64 - 1


@dataclass
class ScanRequest(UseCaseRequest):
    """Request for a self-scan."""

    caller_id: str


@dataclass
class ScanForRequest(UseCaseRequest):
    """Request for a test scan; ``caller_id`` is None for the server console."""

    caller_id: str | None
    target: str | None = None


class _ScanUseCase(UseCase):
    """Shared collaborators and tier lookup for the scan commands."""

    def __init__(
        self,
        config: ScannerConfig,
        permissions: PermissionChecker,
        directory: ActorDirectory,
        scan_log: ScanLog,
        messages: MessageCatalog,
    ) -> None:
        super().__init__()
        self.config = config
        self.permissions = permissions
        self.directory = directory
        self.scan_log = scan_log
        self.messages = messages

    def resolve_for(self, actor_id: str | None) -> EffectiveSettings:
        """Effective settings for ``actor_id``; the console holds every tier."""
        if actor_id is None:
            held = set(self.config.tier_permissions())
        else:
            held = held_tier_permissions(
                actor_id, self.config.permission_tiers, self.permissions.has_permission
            )
        return resolve_settings(held, self.config.permission_tiers, self.config.defaults)


class SelfScanUseCase(_ScanUseCase):
    """
    Scan around the calling actor.

    The cooldown check, the scan and the cooldown record happen under the
    tracker's lock so that two requests from the same actor cannot both
    pass the gate.
    """

    def __init__(
        self,
        config: ScannerConfig,
        permissions: PermissionChecker,
        directory: ActorDirectory,
        scan_log: ScanLog,
        messages: MessageCatalog,
        cooldowns: CooldownTracker,
        notify_after: Callable[[str, float], None],
    ) -> None:
        super().__init__(config, permissions, directory, scan_log, messages)
        self.cooldowns = cooldowns
        self.notify_after = notify_after

    def validate(self, request: ScanRequest) -> None:
        if self.config.require_use_permission and not self.permissions.has_permission(
            request.caller_id, PERM_USE
        ):
            raise PermissionDenied(PERM_USE, request.caller_id)

    def process(self, request: ScanRequest) -> CommandResponse:
        actor = self.directory.find_by_id(request.caller_id)
        if actor is None or not actor.is_connected:
            self.logger.debug(f"Ignoring scan from inactive actor {request.caller_id}")
            return CommandResponse.silent(request.request_id)

        settings = self.resolve_for(actor.id)

        with self.cooldowns.lock:
            if self.cooldowns.is_on_cooldown(actor.id, settings.cooldown_seconds):
                raise OnCooldown(
                    actor.id, self.cooldowns.remaining(actor.id, settings.cooldown_seconds)
                )

            result = scan(
                actor.position,
                actor,
                settings.radius,
                self.directory.snapshot(),
                self.config.filter,
                cooldown_seconds=settings.cooldown_seconds,
            )
            self.cooldowns.record_use(actor.id)

        replies = [
            self.messages.verdict(result.found),
            self.messages.with_time("cooldown_started", settings.cooldown_seconds),
        ]

        self.scan_log.record(
            actor, result.radius, settings.cooldown_seconds, result.found, result.count, "user"
        )
        self.notify_after(actor.id, settings.cooldown_seconds)

        return CommandResponse.success_response(replies, result, request.request_id)


class TestScanUseCase(_ScanUseCase):
    """Admin-only scan from a target actor's position."""

    # Not a pytest test class despite the name
    __test__ = False

    def validate(self, request: ScanForRequest) -> None:
        if not self._is_admin(request.caller_id):
            raise PermissionDenied(PERM_ADMIN, request.caller_id)
        if not request.target or not request.target.strip():
            raise InvalidArgument(SCAN_FOR_USAGE)

    def process(self, request: ScanForRequest) -> CommandResponse:
        query = (request.target or "").strip()
        target = self.find_target(query)
        if target is None:
            raise TargetNotFound(query)

        caller = self.directory.find_by_id(request.caller_id) if request.caller_id else None
        settings = self.resolve_for(request.caller_id)

        result = scan(
            target.position,
            target,
            settings.radius,
            self.directory.snapshot(),
            self.config.filter,
        )

        replies = [
            self.messages.with_name("test_header", target.display_name),
            self.messages.verdict(result.found),
        ]

        self.scan_log.record(
            caller, result.radius, 0.0, result.found, result.count, f"test:{target.id}"
        )

        return CommandResponse.success_response(replies, result, request.request_id)

    def find_target(self, query: str) -> Actor | None:
        """Digit-only queries in the 64-bit id range are ids; others match display names."""
        if query.isascii() and query.isdigit() and int(query) <= MAX_ACTOR_ID:
            return self.directory.find_by_id(query)
        return self.directory.find_by_name_fragment(query)

    def _is_admin(self, caller_id: str | None) -> bool:
        if caller_id is None:
            return True
        if self.permissions.has_permission(caller_id, PERM_ADMIN):
            return True
        caller = self.directory.find_by_id(caller_id)
        return caller is not None and caller.is_privileged
