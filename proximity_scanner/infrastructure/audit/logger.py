"""
Scan event logger.

Formats each completed scan and hands the line to the configured sinks.
Logging is side-effect only: a failing sink is reported on this module's
logger and never reaches the caller or changes the scan result.
"""

import logging
from collections.abc import Callable

from proximity_scanner.application.config import LogConfig
from proximity_scanner.domain.entities.actor import Actor
from proximity_scanner.domain.interfaces.collaborators import ConsoleSink, FileSink

from .formatters import ScanLineFormatter

logger = logging.getLogger(__name__)


class ScanEventLogger:
    """Implements the application's ScanLog on top of console and file sinks."""

    def __init__(
        self,
        config: LogConfig,
        console: ConsoleSink | None = None,
        file_sink: FileSink | None = None,
    ) -> None:
        self.config = config
        self.console = console
        self.file_sink = file_sink
        self.formatter = ScanLineFormatter(config)
        self._error_count = 0

    @property
    def error_count(self) -> int:
        return self._error_count

    def record(
        self,
        actor: Actor | None,
        radius: float,
        cooldown_seconds: float,
        found: bool,
        count: int,
        mode: str,
        log_config: LogConfig | None = None,
    ) -> str | None:
        """
        Record one scan.

        Args:
            actor: Actor the scan is attributed to, None for the console
            radius: Radius used
            cooldown_seconds: Cooldown started by the scan, 0 for none
            found: Whether anything was detected
            count: Number of detected actors
            mode: ``user`` or ``test:<targetId>``
            log_config: Overrides the logger's configuration for this call

        Returns:
            The formatted line, or None when logging is disabled
        """
        config = log_config or self.config
        if not config.enabled:
            return None

        formatter = self.formatter if log_config is None else ScanLineFormatter(config)
        line = formatter.format(actor, radius, cooldown_seconds, found, count, mode)

        if config.echo_to_console and self.console is not None:
            self._emit("console", lambda: self.console.write(line))
        if config.file_name and self.file_sink is not None:
            self._emit(config.file_name, lambda: self.file_sink.append(config.file_name, line))

        return line

    def _emit(self, sink_name: str, write: Callable[[], None]) -> None:
        try:
            write()
        except Exception as e:
            self._error_count += 1
            logger.warning(
                f"Scan log sink {sink_name} failed: {e}",
                extra={"sink": sink_name, "error_type": type(e).__name__},
            )
