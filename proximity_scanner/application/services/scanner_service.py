"""
Scanner Service - lifecycle owner and command boundary.

The host adapter constructs one ScannerService, calls ``start()`` when the
plugin loads, routes ``scan`` / ``scan.for`` commands through
``handle_command`` and calls ``stop()`` on unload. All scanner errors are
turned into replies here; none of them leaves the service.
"""

import itertools
import logging
import threading

from proximity_scanner.application.config import PERM_ADMIN, PERM_USE, ScannerConfig
from proximity_scanner.application.interfaces.scan_log import ScanLog
from proximity_scanner.application.messages import MessageCatalog
from proximity_scanner.application.use_cases.base import CommandResponse
from proximity_scanner.application.use_cases.scan import (
    ScanForRequest,
    ScanRequest,
    SelfScanUseCase,
    TestScanUseCase,
)
from proximity_scanner.domain.exceptions import (
    InvalidArgument,
    OnCooldown,
    PermissionDenied,
    ScannerException,
    TargetNotFound,
)
from proximity_scanner.domain.interfaces.clock import Clock
from proximity_scanner.domain.interfaces.collaborators import (
    ActorDirectory,
    Notifier,
    PermissionChecker,
    ScheduledHandle,
    Scheduler,
)
from proximity_scanner.domain.services.cooldown_tracker import CooldownTracker

logger = logging.getLogger(__name__)

CMD_SCAN = "scan"
CMD_SCAN_FOR = "scan.for"


class ScannerService:
    """Owns the cooldown tracker and pending timers for one plugin instance."""

    def __init__(
        self,
        config: ScannerConfig,
        permissions: PermissionChecker,
        directory: ActorDirectory,
        scheduler: Scheduler,
        notifier: Notifier,
        scan_log: ScanLog,
        clock: Clock,
    ) -> None:
        self.config = config
        self.directory = directory
        self.scheduler = scheduler
        self.notifier = notifier
        self.messages = MessageCatalog(config.messages.overrides())
        self.cooldowns = CooldownTracker(clock)

        self._handles: dict[int, ScheduledHandle] = {}
        self._handle_keys = itertools.count()
        self._lock = threading.RLock()
        self._running = False

        self._self_scan = SelfScanUseCase(
            config,
            permissions,
            directory,
            scan_log,
            self.messages,
            self.cooldowns,
            self._schedule_cooldown_notice,
        )
        self._test_scan = TestScanUseCase(config, permissions, directory, scan_log, self.messages)

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def pending_handles(self) -> int:
        with self._lock:
            return len(self._handles)

    def registered_permissions(self) -> list[str]:
        """Permission keys the host should register for this plugin."""
        return [PERM_USE, PERM_ADMIN, *self.config.tier_permissions()]

    def start(self) -> None:
        with self._lock:
            self._running = True
        logger.info(
            "Proximity scanner started",
            extra={"permissions": self.registered_permissions()},
        )

    def stop(self) -> None:
        """Cancel every pending notification and forget all cooldowns."""
        with self._lock:
            self._running = False
            handles, self._handles = list(self._handles.values()), {}
        for handle in handles:
            handle.cancel()
        self.cooldowns.clear()
        logger.info(f"Proximity scanner stopped, cancelled {len(handles)} timers")

    def handle_command(self, caller_id: str | None, command: str, args: list[str]) -> list[str]:
        """
        Run a command and return the replies for the caller.

        Args:
            caller_id: Actor issuing the command, None for the server console
            command: ``scan`` or ``scan.for``
            args: Command arguments

        Returns:
            Reply lines, possibly empty
        """
        if not self._running:
            raise RuntimeError("ScannerService is not running")

        response = self.execute(caller_id, command, args)
        if response.error is not None:
            return [self.reply_for(response.error)]
        return response.replies

    def execute(self, caller_id: str | None, command: str, args: list[str]) -> CommandResponse:
        if command == CMD_SCAN:
            request = ScanRequest(caller_id=caller_id)
            if caller_id is None:
                # The console has no position to scan from
                return CommandResponse.silent(request.request_id)
            return self._self_scan.execute(request)
        if command == CMD_SCAN_FOR:
            target = args[0] if args else None
            return self._test_scan.execute(ScanForRequest(caller_id=caller_id, target=target))
        return CommandResponse(success=False, error=InvalidArgument(f"Unknown command: {command}"))

    def reply_for(self, error: ScannerException) -> str:
        """Translate a scanner error into the caller's reply text."""
        if isinstance(error, OnCooldown):
            return self.messages.with_time("cooldown_left", error.remaining_seconds)
        if isinstance(error, PermissionDenied):
            key = "admin_only" if error.permission == PERM_ADMIN else "no_permission"
            return self.messages.get(key)
        if isinstance(error, TargetNotFound):
            return self.messages.get("not_found")
        if isinstance(error, InvalidArgument):
            return error.usage
        return error.message

    def _schedule_cooldown_notice(self, actor_id: str, delay_seconds: float) -> None:
        key = next(self._handle_keys)

        def notify() -> None:
            with self._lock:
                self._handles.pop(key, None)
            if not self._running:
                return
            actor = self.directory.find_by_id(actor_id)
            if actor is None or not actor.is_connected:
                return
            self.notifier.send(actor_id, self.messages.get("cooldown_ended"))

        # notify() waits on the lock until its handle is registered
        with self._lock:
            self._handles[key] = self.scheduler.schedule_once(max(delay_seconds, 0.0), notify)
