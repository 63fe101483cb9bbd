"""Use Case for listing a user's budgets for a month."""

from application.result import Result
from domain.aggregates import BudgetAggregate
from domain.repositories import IBudgetAggregateRepository
from .base_use_case import BaseUseCase


class GetBudgetsByMonthUseCase(BaseUseCase):
    """List active budgets of a user for a given month."""

    def __init__(self, budget_repository: IBudgetAggregateRepository):
        super().__init__()
        self.budget_repo = budget_repository

    async def execute(self, user_id: str, month: int, year: int) -> Result[list[BudgetAggregate]]:
        try:
            aggregates = await self.budget_repo.find_many(
                user_id=user_id, month=month, year=year
            )
            # A repository returning nothing is an empty month, not an error.
            active = [
                aggregate
                for aggregate in aggregates or []
                if not aggregate.is_archived()
            ]
            self._log_execution(
                f"Found {len(active)} budgets", user_id=user_id, month=month, year=year
            )
            return Result.ok(active)

        except Exception as e:
            self._log_error(e)
            raise
