"""Application services."""

from .scanner_service import ScannerService

__all__ = ["ScannerService"]
