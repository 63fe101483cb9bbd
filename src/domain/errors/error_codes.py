"""Stable error codes exposed to callers."""

from enum import Enum


class BudgetErrorCode(str, Enum):
    """Error codes raised by the budgeting domain."""

    BUDGET_NOT_FOUND = "BUDGET_NOT_FOUND"
    BUDGET_INVALID_AMOUNT = "BUDGET_INVALID_AMOUNT"
    SPENDING_NOT_FOUND = "SPENDING_NOT_FOUND"
    BUDGET_ALREADY_EXISTS = "BUDGET_ALREADY_EXISTS"
    BUDGET_NOT_BELONG_TO_USER = "BUDGET_NOT_BELONG_TO_USER"
    INCOME_INVALID_AMOUNT = "INCOME_INVALID_AMOUNT"
    INCOME_NOT_FOUND = "INCOME_NOT_FOUND"

    def __str__(self) -> str:
        return self.value


class CommonErrorCode(str, Enum):
    """Error codes shared by value objects."""

    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"

    def __str__(self) -> str:
        return self.value
