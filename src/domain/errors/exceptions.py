"""Typed domain errors carrying a stable code and a human message."""

from typing import Union

from .error_codes import BudgetErrorCode, CommonErrorCode


ErrorCode = Union[BudgetErrorCode, CommonErrorCode]


class DomainError(Exception):
    """
    Base class for every error raised by the domain layer.

    Attributes:
        code: Machine-readable error code
        message: Human readable description
    """

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        """Convert error to dictionary."""
        return {"code": self.code.value, "message": self.message}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class BudgetError(DomainError):
    """Error raised by budget, spending and income rules."""

    code: BudgetErrorCode


class CurrencyMismatchError(DomainError):
    """Raised when combining amounts of different currencies."""

    def __init__(self, left: str, right: str):
        super().__init__(
            CommonErrorCode.CURRENCY_MISMATCH,
            f"Currencies must match: {left} != {right}",
        )
        self.left = left
        self.right = right


class BudgetErrors:
    """Factory for budgeting errors."""

    @staticmethod
    def budget_not_found() -> BudgetError:
        return BudgetError(BudgetErrorCode.BUDGET_NOT_FOUND, "Budget not found")

    @staticmethod
    def budget_invalid_amount() -> BudgetError:
        return BudgetError(
            BudgetErrorCode.BUDGET_INVALID_AMOUNT,
            "Budget amount must be greater than 0",
        )

    @staticmethod
    def transaction_invalid_amount() -> BudgetError:
        return BudgetError(
            BudgetErrorCode.BUDGET_INVALID_AMOUNT,
            "Transaction amount must be greater than 0",
        )

    @staticmethod
    def spending_not_found() -> BudgetError:
        return BudgetError(BudgetErrorCode.SPENDING_NOT_FOUND, "Spending not found")

    @staticmethod
    def budget_already_exists(name: str) -> BudgetError:
        return BudgetError(
            BudgetErrorCode.BUDGET_ALREADY_EXISTS,
            f"Budget with name '{name}' already exists for this month",
        )

    @staticmethod
    def budget_not_belong_to_user() -> BudgetError:
        return BudgetError(
            BudgetErrorCode.BUDGET_NOT_BELONG_TO_USER,
            "Budget does not belong to user",
        )

    @staticmethod
    def income_invalid_amount() -> BudgetError:
        return BudgetError(
            BudgetErrorCode.INCOME_INVALID_AMOUNT,
            "Income amount must be greater than 0",
        )

    @staticmethod
    def income_not_found() -> BudgetError:
        return BudgetError(BudgetErrorCode.INCOME_NOT_FOUND, "Income not found")
