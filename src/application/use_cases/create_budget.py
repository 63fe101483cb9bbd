"""Use Case for creating a monthly budget."""

from decimal import Decimal
from typing import Optional, Union

from application.result import Result
from domain.aggregates import BudgetAggregate
from domain.clock import Clock
from domain.entities import BudgetEntity
from domain.enums import BASE_CURRENCY, BudgetCategory, Currency
from domain.errors import BudgetErrors, DomainError
from domain.repositories import IBudgetAggregateRepository
from domain.value_objects import CurrencyVO
from domain.watch_lists import TransactionsWatchList
from .base_use_case import BaseUseCase


class CreateBudgetUseCase(BaseUseCase):
    """Create a budget unless an active one with the same name exists that month."""

    def __init__(
        self,
        budget_repository: IBudgetAggregateRepository,
        base_currency: Currency = BASE_CURRENCY,
        clock: Optional[Clock] = None,
    ):
        super().__init__()
        self.budget_repo = budget_repository
        self.base_currency = base_currency
        self.clock = clock

    async def execute(
        self,
        user_id: str,
        name: str,
        amount: Union[int, str, Decimal],
        month: int,
        year: int,
        category: BudgetCategory = BudgetCategory.FLEXIBLE,
        color: str = "",
        icon: str = "",
        currency: Optional[Currency] = None,
    ) -> Result[BudgetAggregate]:
        """
        Create a new budget.

        Returns:
            Result with the new BudgetAggregate, or BUDGET_ALREADY_EXISTS /
            BUDGET_INVALID_AMOUNT
        """
        try:
            existing = await self.budget_repo.find_one(
                user_id=user_id, name=name, month=month, year=year
            )
            if existing is not None:
                return self._fail(BudgetErrors.budget_already_exists(name), user_id=user_id)

            budget = BudgetEntity.create(
                user_id=user_id,
                name=name,
                amount=CurrencyVO(amount, currency or self.base_currency),
                month=month,
                year=year,
                category=category,
                color=color,
                icon=icon,
                clock=self.clock,
            )
            aggregate = BudgetAggregate.create(
                budget=budget,
                spending=TransactionsWatchList(),
                clock=self.clock,
            )

            await self.budget_repo.save(aggregate)
            self._log_execution("Created budget", budget_id=budget.id, user_id=user_id)
            return Result.ok(aggregate)

        except DomainError as e:
            return self._fail(e)
        except Exception as e:
            self._log_error(e)
            raise
