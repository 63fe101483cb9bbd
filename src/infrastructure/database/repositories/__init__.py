"""Repository implementations."""

from .sqlalchemy_budget_aggregate_repository import SQLAlchemyBudgetAggregateRepository
from .sqlalchemy_income_repository import SQLAlchemyIncomeRepository

__all__ = ["SQLAlchemyBudgetAggregateRepository", "SQLAlchemyIncomeRepository"]
