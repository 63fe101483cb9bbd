"""Application use cases."""

from .base_use_case import BaseUseCase
from .create_budget import CreateBudgetUseCase
from .get_budget_detail import GetBudgetDetailUseCase
from .get_budgets_by_month import GetBudgetsByMonthUseCase
from .get_budgets_with_spending import GetBudgetsWithSpendingUseCase
from .update_budget import UpdateBudgetUseCase
from .spend import SpendUseCase
from .delete_budget import DeleteBudgetUseCase
from .delete_spending import DeleteSpendingUseCase
from .add_income import AddIncomeUseCase
from .get_income_by_month import GetIncomeByMonthUseCase
from .update_income import UpdateIncomeUseCase
from .remove_income import RemoveIncomeUseCase
from .get_monthly_spending import GetMonthlySpendingUseCase

__all__ = [
    "BaseUseCase",
    "CreateBudgetUseCase",
    "GetBudgetDetailUseCase",
    "GetBudgetsByMonthUseCase",
    "GetBudgetsWithSpendingUseCase",
    "UpdateBudgetUseCase",
    "SpendUseCase",
    "DeleteBudgetUseCase",
    "DeleteSpendingUseCase",
    "AddIncomeUseCase",
    "GetIncomeByMonthUseCase",
    "UpdateIncomeUseCase",
    "RemoveIncomeUseCase",
    "GetMonthlySpendingUseCase",
]
