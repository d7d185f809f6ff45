"""
Log sinks for scan records.

ConsoleLogSink forwards to the standard logging tree so the host's console
handler shows it. FileLogSink appends to one file per destination and day,
``<directory>/<name>/<name>_<YYYY-MM-DD>.txt``, each line prefixed with the
local time.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

SCAN_LOGGER_NAME = "proximity_scanner.scans"


class ConsoleLogSink:
    """Writes lines to a named logger at INFO level."""

    def __init__(self, logger_name: str = SCAN_LOGGER_NAME) -> None:
        self._logger = logging.getLogger(logger_name)

    def write(self, line: str) -> None:
        self._logger.info(line)


class FileLogSink:
    """Appends timestamped lines to dated per-destination files."""

    def __init__(
        self,
        directory: str | Path = "logs",
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.directory = Path(directory)
        self._now = now
        self._lock = threading.Lock()

    def path_for(self, destination: str, when: datetime | None = None) -> Path:
        when = when or self._now()
        return self.directory / destination / f"{destination}_{when:%Y-%m-%d}.txt"

    def append(self, destination: str, line: str) -> None:
        """
        Append one line to the destination's file for today.

        Raises:
            OSError: If the file cannot be written
        """
        when = self._now()
        path = self.path_for(destination, when)
        with self._lock:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(f"[{when:%H:%M:%S}] {line}\n")
