"""Use cases behind the scanner commands."""

from .base import CommandResponse, UseCase, UseCaseRequest
from .scan import ScanForRequest, ScanRequest, SelfScanUseCase, TestScanUseCase

__all__ = [
    "CommandResponse",
    "ScanForRequest",
    "ScanRequest",
    "SelfScanUseCase",
    "TestScanUseCase",
    "UseCase",
    "UseCaseRequest",
]
