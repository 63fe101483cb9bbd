"""Tagged result returned by use cases."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from domain.errors import DomainError


T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a use case: either a value or a domain error.

    Attributes:
        value: Payload on success
        error: Domain error on failure
    """

    value: Optional[T] = None
    error: Optional[DomainError] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: DomainError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code.value if self.error else None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
