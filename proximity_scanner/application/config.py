"""
Scanner Configuration - Typed settings for the proximity scanner.

This module provides the configuration document the service is started
with: defaults, filters, scan logging, permission tiers and message
overrides. Loading and saving live in ``config_loader``.
"""

import os
from dataclasses import dataclass, field
from typing import Any

from proximity_scanner.domain.value_objects.scan_settings import (
    EffectiveSettings,
    FilterConfig,
    Tier,
)

PERM_USE = "proximityscanner.use"
PERM_ADMIN = "proximityscanner.admin"


def default_tiers() -> list[Tier]:
    """Tier ladder written to a fresh configuration file."""
    return [
        Tier(permission="proximityscanner.tier1", scan_radius=125.0, cooldown_seconds=480.0, priority=1),
        Tier(permission="proximityscanner.tier2", scan_radius=150.0, cooldown_seconds=360.0, priority=2),
        Tier(permission="proximityscanner.tier3", scan_radius=175.0, cooldown_seconds=240.0, priority=3),
    ]


@dataclass
class LogConfig:
    """Scan log configuration."""

    enabled: bool = True
    echo_to_console: bool = True
    include_position: bool = True
    include_count: bool = False
    file_name: str = "ProximityScanner"
    directory: str = "logs"


@dataclass
class MessageConfig:
    """Optional overrides for reply texts; None keeps the built-in text."""

    detected: str | None = None
    clear: str | None = None
    cooldown_started: str | None = None
    cooldown_left: str | None = None
    cooldown_ended: str | None = None
    no_permission: str | None = None
    admin_only: str | None = None
    not_found: str | None = None
    test_header: str | None = None

    def overrides(self) -> dict[str, str]:
        """Non-empty overrides keyed by field name."""
        return {k: v for k, v in self.__dict__.items() if v}


@dataclass
class ScannerConfig:
    """Main scanner configuration."""

    require_use_permission: bool = False
    default_scan_radius: float = 100.0
    default_cooldown_seconds: float = 600.0
    filter: FilterConfig = field(default_factory=FilterConfig)
    log: LogConfig = field(default_factory=LogConfig)
    permission_tiers: list[Tier] = field(default_factory=default_tiers)
    messages: MessageConfig = field(default_factory=MessageConfig)

    def __post_init__(self) -> None:
        self.validate()

    @property
    def defaults(self) -> EffectiveSettings:
        return EffectiveSettings(
            radius=self.default_scan_radius, cooldown_seconds=self.default_cooldown_seconds
        )

    def tier_permissions(self) -> list[str]:
        """Permission keys of every enabled tier, in configuration order."""
        return [t.permission for t in self.permission_tiers if t.enabled]

    def validate(self) -> bool:
        """
        Validate the configuration.

        Returns:
            True if valid, raises ValueError otherwise
        """
        if self.default_scan_radius <= 0:
            raise ValueError(f"Default scan radius must be positive: {self.default_scan_radius}")
        if self.default_cooldown_seconds < 0:
            raise ValueError(
                f"Default cooldown must be non-negative: {self.default_cooldown_seconds}"
            )
        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "require_use_permission": self.require_use_permission,
            "default_scan_radius": self.default_scan_radius,
            "default_cooldown_seconds": self.default_cooldown_seconds,
            "filter": {
                "ignore_teammates": self.filter.ignore_teammates,
                "ignore_admins": self.filter.ignore_admins,
                "ignore_safezone": self.filter.ignore_safezone,
                "ignore_sleeping": self.filter.ignore_sleeping,
                "ignore_dead": self.filter.ignore_dead,
                "ignore_npc": self.filter.ignore_npc,
            },
            "log": {
                "enabled": self.log.enabled,
                "echo_to_console": self.log.echo_to_console,
                "include_position": self.log.include_position,
                "include_count": self.log.include_count,
                "file_name": self.log.file_name,
                "directory": self.log.directory,
            },
            "permission_tiers": [
                {
                    "permission": t.permission,
                    "scan_radius": t.scan_radius,
                    "cooldown_seconds": t.cooldown_seconds,
                    "priority": t.priority,
                }
                for t in self.permission_tiers
            ],
            "messages": self.messages.overrides(),
        }


@dataclass
class LoggingSettings:
    """Process-wide logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """Create configuration from environment variables."""
        file_path = os.getenv("LOG_FILE")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file=file_path if file_path else None,
            max_bytes=int(os.getenv("LOG_MAX_BYTES", "10485760")),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        )
