"""Use Case for retrieving a single budget."""

from typing import Optional
from uuid import UUID

from application.result import Result
from domain.aggregates import BudgetAggregate
from domain.errors import BudgetErrors
from domain.repositories import IBudgetAggregateRepository
from .base_use_case import BaseUseCase


class GetBudgetDetailUseCase(BaseUseCase):
    """
    Get a budget with its spending.

    Missing, archived and foreign budgets all yield BUDGET_NOT_FOUND so
    existence is not leaked across users.
    """

    def __init__(self, budget_repository: IBudgetAggregateRepository):
        super().__init__()
        self.budget_repo = budget_repository

    async def execute(
        self,
        budget_id: UUID,
        user_id: Optional[str] = None,
    ) -> Result[BudgetAggregate]:
        try:
            aggregate = await self.budget_repo.find_by_id(budget_id)

            if aggregate is None or aggregate.is_archived():
                return self._fail(BudgetErrors.budget_not_found())

            if user_id is not None and not aggregate.belongs_to(user_id):
                return self._fail(BudgetErrors.budget_not_found())

            return Result.ok(aggregate)

        except Exception as e:
            self._log_error(e, budget_id=budget_id)
            raise
