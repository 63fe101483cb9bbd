"""Use Case for retrieving a user's income for a month."""

from application.result import Result
from domain.aggregates import IncomeAggregate
from domain.repositories import IIncomeRepository
from .base_use_case import BaseUseCase


class GetIncomeByMonthUseCase(BaseUseCase):
    """Load the income aggregate of a user for a month."""

    def __init__(self, income_repository: IIncomeRepository):
        super().__init__()
        self.income_repo = income_repository

    async def execute(self, user_id: str, month: int, year: int) -> Result[IncomeAggregate]:
        try:
            aggregate = await self.income_repo.find_by_month(
                user_id=user_id, month=month, year=year
            )
            return Result.ok(aggregate)

        except Exception as e:
            self._log_error(e)
            raise
