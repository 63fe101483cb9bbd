"""Domain Projections - Read models derived from aggregates."""

from .budget_spending import BudgetSpending
from .budget_with_spending import BudgetWithSpending

__all__ = ["BudgetSpending", "BudgetWithSpending"]
