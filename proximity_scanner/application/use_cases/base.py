"""
Base Use Case

Provides the foundation for the scanner's use cases. Implements the common
execution template: logging, validation and conversion of scanner errors
into an error response.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID, uuid4

from proximity_scanner.domain.exceptions import ScannerException
from proximity_scanner.domain.services.scan_engine import ScanResult

logger = logging.getLogger(__name__)

# Type variables for request and response
TRequest = TypeVar("TRequest", bound="UseCaseRequest")
TResponse = TypeVar("TResponse", bound="CommandResponse")


@dataclass(kw_only=True)
class UseCaseRequest:
    """Base class for use case requests."""

    request_id: UUID = field(default_factory=uuid4)


@dataclass
class CommandResponse:
    """Replies and outcome of one command."""

    success: bool
    replies: list[str] = field(default_factory=list)
    result: ScanResult | None = None
    error: ScannerException | None = None
    request_id: UUID | None = None

    @classmethod
    def success_response(
        cls, replies: list[str], result: ScanResult | None, request_id: UUID
    ) -> "CommandResponse":
        """Create a successful response."""
        return cls(success=True, replies=replies, result=result, request_id=request_id)

    @classmethod
    def error_response(cls, error: ScannerException, request_id: UUID) -> "CommandResponse":
        """Create an error response."""
        return cls(success=False, error=error, request_id=request_id)

    @classmethod
    def silent(cls, request_id: UUID) -> "CommandResponse":
        """A request that is dropped without any reply."""
        return cls(success=False, request_id=request_id)


class UseCase(ABC, Generic[TRequest, TResponse]):
    """
    Abstract base class for all use cases.

    Provides a consistent interface and common functionality for
    command orchestration.
    """

    def __init__(self, name: str | None = None) -> None:
        """
        Initialize use case.

        Args:
            name: Optional name for the use case (defaults to class name)
        """
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    def execute(self, request: TRequest) -> TResponse:
        """
        Execute the use case.

        Scanner exceptions raised by validation or processing are returned
        as an error response; anything else propagates.

        Args:
            request: The use case request

        Returns:
            The use case response
        """
        request_id = request.request_id

        self.logger.debug(
            f"Executing {self.name}",
            extra={"request_id": str(request_id), "use_case": self.name},
        )

        try:
            self.validate(request)
            response = self.process(request)
        except ScannerException as e:
            self.logger.info(
                f"{self.name} rejected: {e.message}",
                extra={"request_id": str(request_id), "error": e.to_dict()},
            )
            return self._create_error_response(e, request_id)

        self.logger.debug(
            f"Executed {self.name}",
            extra={"request_id": str(request_id), "success": response.success},
        )
        return response

    @abstractmethod
    def validate(self, request: TRequest) -> None:
        """
        Validate the request.

        Raises:
            ScannerException: If the request may not proceed
        """

    @abstractmethod
    def process(self, request: TRequest) -> TResponse:
        """
        Process the request and execute business logic.

        Args:
            request: The validated request

        Returns:
            The response
        """

    def _create_error_response(self, error: ScannerException, request_id: UUID) -> TResponse:
        return CommandResponse.error_response(error, request_id)  # type: ignore[return-value]
