"""Use Case for (soft) deleting a budget."""

from typing import Optional
from uuid import UUID

from application.result import Result
from domain.clock import Clock
from domain.errors import BudgetErrors
from domain.repositories import IBudgetAggregateRepository
from .base_use_case import BaseUseCase


class DeleteBudgetUseCase(BaseUseCase):
    """Archive a budget; its transactions are kept."""

    def __init__(
        self,
        budget_repository: IBudgetAggregateRepository,
        clock: Optional[Clock] = None,
    ):
        super().__init__()
        self.budget_repo = budget_repository
        self.clock = clock

    async def execute(self, budget_id: UUID, user_id: Optional[str] = None) -> Result[None]:
        try:
            aggregate = await self.budget_repo.find_by_id(budget_id)

            if aggregate is None or aggregate.is_archived():
                return self._fail(BudgetErrors.budget_not_found())

            if user_id is not None and not aggregate.belongs_to(user_id):
                return self._fail(BudgetErrors.budget_not_found())

            aggregate.budget.archive(clock=self.clock)

            await self.budget_repo.save(aggregate)
            self._log_execution("Archived budget", budget_id=budget_id)
            return Result.ok()

        except Exception as e:
            self._log_error(e, budget_id=budget_id)
            raise
