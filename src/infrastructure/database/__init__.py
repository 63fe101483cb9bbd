"""Database infrastructure module."""

from .session import Base, get_engine, get_session, get_session_factory, init_db, close_db
from .models import BudgetModel, TransactionModel, BudgetTransactionModel

__all__ = [
    "Base",
    "get_engine",
    "get_session",
    "get_session_factory",
    "init_db",
    "close_db",
    "BudgetModel",
    "TransactionModel",
    "BudgetTransactionModel",
]
