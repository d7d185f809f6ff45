"""
Configuration Loader - Handles IO operations for configuration management.

This module is responsible for loading and saving the scanner configuration
from/to YAML files while keeping ScannerConfig focused on data
representation and validation. Missing keys are filled from the defaults;
there is no migration between versions of the document.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from proximity_scanner.application.config import LogConfig, MessageConfig, ScannerConfig
from proximity_scanner.domain.value_objects.scan_settings import FilterConfig, Tier

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "PROXIMITY_SCANNER_CONFIG"
DEFAULT_CONFIG_PATH = "config/ProximityScanner.yaml"

# Field defaults for a tier entry that omits keys
TIER_ENTRY_DEFAULTS: dict[str, Any] = {
    "permission": "proximityscanner.tier1",
    "scan_radius": 125.0,
    "cooldown_seconds": 480.0,
    "priority": 1,
}


class ConfigLoader:
    """Handles loading and saving of configuration from various sources."""

    @classmethod
    def resolve_path(cls) -> Path:
        """
        Resolve the configuration file path.

        Reads ``PROXIMITY_SCANNER_CONFIG`` after loading a ``.env`` file if
        one is present.

        Returns:
            Path: Location of the YAML configuration document
        """
        load_dotenv()
        return Path(os.getenv(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ScannerConfig:
        """
        Build configuration from a parsed document.

        Args:
            data: Parsed YAML mapping, possibly empty or None

        Returns:
            ScannerConfig: Configuration with missing keys defaulted
        """
        config = ScannerConfig()

        # Handle empty or null YAML documents
        if not data:
            return config

        config.require_use_permission = bool(
            data.get("require_use_permission", config.require_use_permission)
        )
        config.default_scan_radius = float(
            data.get("default_scan_radius", config.default_scan_radius)
        )
        config.default_cooldown_seconds = float(
            data.get("default_cooldown_seconds", config.default_cooldown_seconds)
        )

        if "filter" in data:
            filter_data = data["filter"] or {}
            defaults = config.filter
            config.filter = FilterConfig(
                ignore_teammates=filter_data.get("ignore_teammates", defaults.ignore_teammates),
                ignore_admins=filter_data.get("ignore_admins", defaults.ignore_admins),
                ignore_safezone=filter_data.get("ignore_safezone", defaults.ignore_safezone),
                ignore_sleeping=filter_data.get("ignore_sleeping", defaults.ignore_sleeping),
                ignore_dead=filter_data.get("ignore_dead", defaults.ignore_dead),
                ignore_npc=filter_data.get("ignore_npc", defaults.ignore_npc),
            )

        if "log" in data:
            log_data = data["log"] or {}
            defaults_log = config.log
            config.log = LogConfig(
                enabled=log_data.get("enabled", defaults_log.enabled),
                echo_to_console=log_data.get("echo_to_console", defaults_log.echo_to_console),
                include_position=log_data.get("include_position", defaults_log.include_position),
                include_count=log_data.get("include_count", defaults_log.include_count),
                file_name=log_data.get("file_name", defaults_log.file_name) or "",
                directory=log_data.get("directory", defaults_log.directory),
            )

        if "permission_tiers" in data:
            config.permission_tiers = [
                cls._tier_from_dict(entry) for entry in (data["permission_tiers"] or [])
            ]

        if "messages" in data:
            msg_data = data["messages"] or {}
            config.messages = MessageConfig(
                **{k: msg_data.get(k) for k in MessageConfig.__dataclass_fields__}
            )

        config.validate()
        return config

    @staticmethod
    def _tier_from_dict(entry: dict[str, Any] | None) -> Tier:
        entry = entry or {}
        permission = entry.get("permission", TIER_ENTRY_DEFAULTS["permission"])
        return Tier(
            permission=permission or "",
            scan_radius=float(entry.get("scan_radius", TIER_ENTRY_DEFAULTS["scan_radius"])),
            cooldown_seconds=float(
                entry.get("cooldown_seconds", TIER_ENTRY_DEFAULTS["cooldown_seconds"])
            ),
            priority=int(entry.get("priority", TIER_ENTRY_DEFAULTS["priority"])),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ScannerConfig:
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ScannerConfig: Configuration loaded from YAML file
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data)

    @classmethod
    def load_or_create(cls, path: str | Path | None = None) -> ScannerConfig:
        """
        Load configuration, writing the defaults first if the file is missing.

        Args:
            path: Path to the YAML file; resolved from the environment if None

        Returns:
            ScannerConfig: Loaded or freshly created configuration
        """
        config_path = Path(path) if path is not None else cls.resolve_path()

        if not config_path.exists():
            logger.info(f"Creating default configuration at {config_path}")
            config = ScannerConfig()
            cls.save_to_yaml(config, config_path)
            return config

        return cls.from_yaml(config_path)

    @classmethod
    def to_yaml(cls, config: ScannerConfig) -> str:
        """
        Convert configuration to YAML string.

        Args:
            config: ScannerConfig instance to convert

        Returns:
            str: YAML representation of the configuration
        """
        return yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False)

    @classmethod
    def save_to_yaml(cls, config: ScannerConfig, path: str | Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: ScannerConfig instance to save
            path: Path to save the YAML file to
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            f.write(cls.to_yaml(config))
