"""Use Case for listing budgets together with their spending totals."""

from application.result import Result
from domain.projections import BudgetWithSpending
from .get_budgets_by_month import GetBudgetsByMonthUseCase


class GetBudgetsWithSpendingUseCase(GetBudgetsByMonthUseCase):
    """List active budgets for a month, projected with spent / remaining figures."""

    async def execute(self, user_id: str, month: int, year: int) -> Result[list[BudgetWithSpending]]:
        result = await super().execute(user_id=user_id, month=month, year=year)
        if result.is_failure:
            return Result.fail(result.error)

        return Result.ok(
            [BudgetWithSpending.from_aggregate(aggregate) for aggregate in result.value]
        )
