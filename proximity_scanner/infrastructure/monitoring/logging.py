"""
Logging setup for the proximity scanner.

Configures the standard logging tree from LoggingSettings: a console
handler always, plus a size-rotated file handler when a file is set.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from proximity_scanner.application.config import LoggingSettings


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """
    Configure the ``proximity_scanner`` logger tree.

    Args:
        settings: Logging settings; read from the environment if None

    Returns:
        The configured package logger
    """
    settings = settings or LoggingSettings.from_env()

    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {settings.level}")

    package_logger = logging.getLogger("proximity_scanner")
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(settings.format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if settings.file:
        Path(settings.file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            settings.file,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger
