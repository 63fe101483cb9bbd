"""Domain Aggregates - Consistency boundaries."""

from .budget_aggregate import BudgetAggregate, DEFAULT_SPENDING_NAME
from .income_aggregate import IncomeAggregate

__all__ = ["BudgetAggregate", "DEFAULT_SPENDING_NAME", "IncomeAggregate"]
