"""
Scan audit logging.

One line per scan, written best-effort to the operator console and to a
named, dated log file.

Example:
    >>> from proximity_scanner.infrastructure.audit import (
    ...     ConsoleLogSink, FileLogSink, ScanEventLogger,
    ... )
    >>> scan_log = ScanEventLogger(config.log, ConsoleLogSink(), FileLogSink("logs"))
"""

from .formatters import ScanLineFormatter, format_radius, format_seconds
from .logger import ScanEventLogger
from .sinks import ConsoleLogSink, FileLogSink

__all__ = [
    "ConsoleLogSink",
    "FileLogSink",
    "ScanEventLogger",
    "ScanLineFormatter",
    "format_radius",
    "format_seconds",
]
