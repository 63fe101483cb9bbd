"""SQLAlchemy ORM models."""

from .budget_model import BudgetModel, TransactionModel, BudgetTransactionModel

__all__ = ["BudgetModel", "TransactionModel", "BudgetTransactionModel"]
