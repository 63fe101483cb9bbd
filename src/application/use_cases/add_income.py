"""Use Case for recording income."""

from decimal import Decimal
from typing import Optional, Union

from application.result import Result
from domain.clock import Clock, resolve_clock
from domain.entities import TransactionEntity
from domain.enums import BASE_CURRENCY, Currency
from domain.errors import DomainError
from domain.repositories import IIncomeRepository
from domain.value_objects import CurrencyVO
from .base_use_case import BaseUseCase


class AddIncomeUseCase(BaseUseCase):
    """Add an income transaction to the current month."""

    def __init__(
        self,
        income_repository: IIncomeRepository,
        base_currency: Currency = BASE_CURRENCY,
        clock: Optional[Clock] = None,
    ):
        super().__init__()
        self.income_repo = income_repository
        self.base_currency = base_currency
        self.clock = clock

    async def execute(
        self,
        user_id: str,
        amount: Union[int, str, Decimal],
        recurring: int = 0,
        name: str = "Income",
    ) -> Result[TransactionEntity]:
        try:
            clock = resolve_clock(self.clock)
            now = clock.now()
            aggregate = await self.income_repo.find_by_month(
                user_id=user_id, month=now.month, year=now.year
            )
            aggregate.clock = clock

            transaction = aggregate.add_income(
                CurrencyVO(amount, self.base_currency),
                recurring=recurring,
                name=name,
            )

            await self.income_repo.save(aggregate)
            self._log_execution(
                f"Added income {transaction.amount}",
                user_id=user_id,
                transaction_id=transaction.id,
            )
            return Result.ok(transaction)

        except DomainError as e:
            return self._fail(e)
        except Exception as e:
            self._log_error(e)
            raise
