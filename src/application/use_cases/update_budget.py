"""Use Case for updating a budget's display fields."""

from typing import Optional
from uuid import UUID

from application.result import Result
from domain.aggregates import BudgetAggregate
from domain.clock import Clock
from domain.entities import BudgetChanges
from domain.errors import BudgetErrors, DomainError
from domain.repositories import IBudgetAggregateRepository
from .base_use_case import BaseUseCase


class UpdateBudgetUseCase(BaseUseCase):
    """Patch name, category, color, icon or period of a budget."""

    def __init__(
        self,
        budget_repository: IBudgetAggregateRepository,
        clock: Optional[Clock] = None,
    ):
        super().__init__()
        self.budget_repo = budget_repository
        self.clock = clock

    async def execute(
        self,
        budget_id: UUID,
        user_id: str,
        changes: BudgetChanges,
    ) -> Result[BudgetAggregate]:
        """
        Apply a partial update.

        Moving the budget to a name and period already used by another
        active budget of the same user fails with BUDGET_ALREADY_EXISTS.
        """
        try:
            aggregate = await self.budget_repo.find_by_id(budget_id)

            if (
                aggregate is None
                or not aggregate.belongs_to(user_id)
                or aggregate.is_archived()
            ):
                return self._fail(BudgetErrors.budget_not_found())

            budget = aggregate.budget
            name = changes.name if changes.name is not None else budget.name
            month = changes.month if changes.month is not None else budget.month
            year = changes.year if changes.year is not None else budget.year
            if (name, month, year) != (budget.name, budget.month, budget.year):
                existing = await self.budget_repo.find_one(
                    user_id=user_id, name=name, month=month, year=year
                )
                if existing is not None and existing.id != aggregate.id:
                    return self._fail(BudgetErrors.budget_already_exists(name), budget_id=budget_id)

            budget.update(changes, clock=self.clock)

            await self.budget_repo.save(aggregate)
            self._log_execution("Updated budget", budget_id=budget_id)
            return Result.ok(aggregate)

        except DomainError as e:
            return self._fail(e)
        except Exception as e:
            self._log_error(e, budget_id=budget_id)
            raise
