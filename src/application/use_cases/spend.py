"""Use Case for recording spending against a budget."""

from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from application.result import Result
from domain.clock import Clock
from domain.entities import TransactionEntity
from domain.errors import BudgetErrors, DomainError
from domain.repositories import IBudgetAggregateRepository
from domain.value_objects import CurrencyVO
from .base_use_case import BaseUseCase


class SpendUseCase(BaseUseCase):
    """Add a spending transaction to a budget the caller owns."""

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
        amount: Union[int, str, Decimal],
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: Optional[int] = None,
    ) -> Result[TransactionEntity]:
        """
        Spend from a budget.

        The amount is expressed in the budget's currency. A non-positive
        amount is rejected before the aggregate is touched.

        Returns:
            Result with the created transaction, or BUDGET_NOT_FOUND /
            BUDGET_NOT_BELONG_TO_USER / BUDGET_INVALID_AMOUNT
        """
        try:
            aggregate = await self.budget_repo.find_by_id(budget_id)

            if aggregate is None or aggregate.is_archived():
                return self._fail(BudgetErrors.budget_not_found())

            if not aggregate.belongs_to(user_id):
                return self._fail(
                    BudgetErrors.budget_not_belong_to_user(), budget_id=budget_id, user_id=user_id
                )

            value = CurrencyVO(amount, aggregate.total_budget.currency)
            if not value.is_positive():
                return self._fail(BudgetErrors.transaction_invalid_amount(), budget_id=budget_id)

            if self.clock is not None:
                aggregate.clock = self.clock

            transaction = aggregate.spend(
                amount=value,
                name=name,
                description=description,
                recurring=recurring,
            )

            await self.budget_repo.save(aggregate)
            self._log_execution(
                f"Spent {transaction.amount}, remaining {aggregate.remaining_budget}",
                budget_id=budget_id,
                transaction_id=transaction.id,
            )
            return Result.ok(transaction)

        except DomainError as e:
            return self._fail(e)
        except Exception as e:
            self._log_error(e, budget_id=budget_id)
            raise
