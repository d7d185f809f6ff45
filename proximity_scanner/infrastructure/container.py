"""
Dependency Injection Container - Wires a ScannerService for a host.

Hosts pass the collaborators they own (permission checks, actor directory,
reply delivery); everything else falls back to the infrastructure
implementations in this package.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from proximity_scanner.application.config import ScannerConfig
from proximity_scanner.application.config_loader import ConfigLoader
from proximity_scanner.application.services.scanner_service import ScannerService
from proximity_scanner.domain.interfaces.clock import Clock
from proximity_scanner.domain.interfaces.collaborators import (
    ActorDirectory,
    Notifier,
    PermissionChecker,
    Scheduler,
)
from proximity_scanner.infrastructure.audit.logger import ScanEventLogger
from proximity_scanner.infrastructure.audit.sinks import ConsoleLogSink, FileLogSink
from proximity_scanner.infrastructure.notifier import LoggingNotifier
from proximity_scanner.infrastructure.repositories.in_memory import (
    InMemoryActorDirectory,
    InMemoryPermissionStore,
)
from proximity_scanner.infrastructure.scheduling.timer_scheduler import TimerScheduler
from proximity_scanner.infrastructure.time.monotonic_clock import MonotonicClock

logger = logging.getLogger(__name__)


@dataclass
class ScannerContainer:
    """Collaborators for one scanner instance."""

    config: ScannerConfig = field(default_factory=ScannerConfig)
    permissions: PermissionChecker = field(default_factory=InMemoryPermissionStore)
    directory: ActorDirectory = field(default_factory=InMemoryActorDirectory)
    scheduler: Scheduler = field(default_factory=TimerScheduler)
    notifier: Notifier = field(default_factory=LoggingNotifier)
    clock: Clock = field(default_factory=MonotonicClock)

    @classmethod
    def from_config_file(
        cls, path: str | Path | None = None, **collaborators: Any
    ) -> "ScannerContainer":
        """Load (or create) the YAML configuration and build a container around it."""
        return cls(config=ConfigLoader.load_or_create(path), **collaborators)

    def build_scan_log(self) -> ScanEventLogger:
        return ScanEventLogger(
            self.config.log,
            console=ConsoleLogSink(),
            file_sink=FileLogSink(self.config.log.directory),
        )

    def build_service(self) -> ScannerService:
        logger.debug("Building scanner service")
        return ScannerService(
            config=self.config,
            permissions=self.permissions,
            directory=self.directory,
            scheduler=self.scheduler,
            notifier=self.notifier,
            scan_log=self.build_scan_log(),
            clock=self.clock,
        )
