"""Use Case for listing every spending of a user in a month."""

from application.result import Result
from domain.projections import BudgetSpending
from domain.repositories import IBudgetAggregateRepository
from .base_use_case import BaseUseCase


class GetMonthlySpendingUseCase(BaseUseCase):
    """List spending transactions of a month, each paired with its budget."""

    def __init__(self, budget_repository: IBudgetAggregateRepository):
        super().__init__()
        self.budget_repo = budget_repository

    async def execute(self, user_id: str, month: int, year: int) -> Result[list[BudgetSpending]]:
        try:
            spending = await self.budget_repo.find_spending_by_month(
                user_id=user_id, month=month, year=year
            )
            return Result.ok(spending)

        except Exception as e:
            self._log_error(e, user_id=user_id)
            raise
