"""Kinds of money movement."""

from enum import Enum


class TransactionType(str, Enum):
    """Type of a transaction."""

    INCOME = "income"
    OUTCOME = "outcome"
    TRANSFER = "transfer"
    BUDGET_SPENDING = "budget_spending"

    def __str__(self) -> str:
        return self.value
