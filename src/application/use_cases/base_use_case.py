"""Base use case class for common use case functionality."""

from abc import ABC, abstractmethod
from typing import Any

from application.result import Result
from domain.errors import DomainError
from infrastructure.config import get_logger


class BaseUseCase(ABC):
    """
    Base class for all use cases.

    Use cases are the error boundary of the application: domain errors are
    returned as a failed ``Result``, anything else is logged and re-raised.
    """

    def __init__(self) -> None:
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    async def execute(self, *args, **kwargs) -> Result[Any]:
        """
        Execute use case logic.

        This method must be implemented by all use cases.

        Returns:
            Result carrying the payload or a domain error
        """
        pass

    def _fail(self, error: DomainError, **context: Any) -> Result[Any]:
        """Log a domain failure and wrap it in a Result."""
        self.logger.warning(
            f"[{self.__class__.__name__}] {error}",
            extra={"error_code": error.code, **context},
        )
        return Result.fail(error)

    def _log_execution(self, message: str, **context: Any) -> None:
        """Log use case execution with structured context."""
        self.logger.info(f"[{self.__class__.__name__}] {message}", extra=context)

    def _log_error(self, error: Exception, **context: Any) -> None:
        """Log unexpected use case error."""
        self.logger.error(
            f"[{self.__class__.__name__}] Error: {str(error)}",
            exc_info=True,
            extra=context,
        )
