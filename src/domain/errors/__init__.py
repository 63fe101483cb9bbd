"""Domain Errors - Typed errors with stable codes."""

from .error_codes import BudgetErrorCode, CommonErrorCode
from .exceptions import (
    DomainError,
    BudgetError,
    CurrencyMismatchError,
    BudgetErrors,
)

__all__ = [
    "BudgetErrorCode",
    "CommonErrorCode",
    "DomainError",
    "BudgetError",
    "CurrencyMismatchError",
    "BudgetErrors",
]
