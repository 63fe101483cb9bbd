"""Domain Enums - Constant values used across the domain."""

from .currency import Currency, BASE_CURRENCY
from .transaction_type import TransactionType
from .budget_category import BudgetCategory

__all__ = ["Currency", "BASE_CURRENCY", "TransactionType", "BudgetCategory"]
