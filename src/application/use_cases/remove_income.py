"""Use Case for removing an income transaction."""

from typing import Optional
from uuid import UUID

from application.result import Result
from domain.errors import BudgetErrors
from domain.repositories import IIncomeRepository
from .base_use_case import BaseUseCase


class RemoveIncomeUseCase(BaseUseCase):
    """Delete one income; the repository deletes its row."""

    def __init__(self, income_repository: IIncomeRepository):
        super().__init__()
        self.income_repo = income_repository

    async def execute(self, income_id: UUID, user_id: Optional[str] = None) -> Result[None]:
        try:
            aggregate = await self.income_repo.find_income_by_id(income_id)
            income = aggregate.find_income(income_id) if aggregate is not None else None

            if income is None or (user_id is not None and aggregate.user_id != user_id):
                return self._fail(BudgetErrors.income_not_found(), income_id=income_id)

            aggregate.remove_income(income)

            await self.income_repo.save(aggregate)
            self._log_execution("Removed income", user_id=aggregate.user_id, transaction_id=income_id)
            return Result.ok()

        except Exception as e:
            self._log_error(e, income_id=income_id)
            raise
