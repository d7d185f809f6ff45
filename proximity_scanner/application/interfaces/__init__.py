"""Application-level interfaces implemented by the infrastructure layer."""

from .scan_log import ScanLog

__all__ = ["ScanLog"]
