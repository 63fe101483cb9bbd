"""Use Case for removing a spending transaction from a budget."""

from uuid import UUID

from application.result import Result
from domain.errors import BudgetErrors
from domain.repositories import IBudgetAggregateRepository
from .base_use_case import BaseUseCase


class DeleteSpendingUseCase(BaseUseCase):
    """Remove one spending transaction; the repository deletes its row."""

    def __init__(self, budget_repository: IBudgetAggregateRepository):
        super().__init__()
        self.budget_repo = budget_repository

    async def execute(self, budget_id: UUID, spending_id: UUID, user_id: str) -> Result[None]:
        try:
            aggregate = await self.budget_repo.find_by_id(budget_id)

            if aggregate is None or aggregate.is_archived():
                return self._fail(BudgetErrors.budget_not_found())

            if not aggregate.belongs_to(user_id):
                return self._fail(
                    BudgetErrors.budget_not_belong_to_user(), budget_id=budget_id, user_id=user_id
                )

            spending = aggregate.find_spending(spending_id)
            if spending is None:
                return self._fail(BudgetErrors.spending_not_found(), spending_id=spending_id)

            aggregate.remove_spending(spending)

            await self.budget_repo.save(aggregate)
            self._log_execution("Removed spending", budget_id=budget_id, spending_id=spending_id)
            return Result.ok()

        except Exception as e:
            self._log_error(e, budget_id=budget_id)
            raise
