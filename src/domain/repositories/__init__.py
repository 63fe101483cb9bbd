"""Domain Repository Interfaces - Abstract definitions."""

from .budget_aggregate_repository import IBudgetAggregateRepository
from .income_repository import IIncomeRepository

__all__ = ["IBudgetAggregateRepository", "IIncomeRepository"]
