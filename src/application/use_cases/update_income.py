"""Use Case for editing an income transaction."""

from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from application.result import Result
from domain.clock import Clock, resolve_clock
from domain.entities import TransactionChanges, TransactionEntity
from domain.enums import BASE_CURRENCY, Currency
from domain.errors import BudgetErrors, DomainError
from domain.repositories import IIncomeRepository
from domain.value_objects import CurrencyVO
from .base_use_case import BaseUseCase


class UpdateIncomeUseCase(BaseUseCase):
    """Change the amount, recurrence or name of an income."""

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
        income_id: UUID,
        amount: Union[int, str, Decimal],
        recurring: int = 0,
        name: str = "Income",
        user_id: Optional[str] = None,
    ) -> Result[TransactionEntity]:
        """
        Overwrite the editable fields of an income.

        When ``user_id`` is given, an income owned by someone else is
        reported as not found.

        Returns:
            Result with the updated transaction, or INCOME_NOT_FOUND /
            INCOME_INVALID_AMOUNT
        """
        try:
            aggregate = await self.income_repo.find_income_by_id(income_id)
            income = aggregate.find_income(income_id) if aggregate is not None else None

            if income is None or (user_id is not None and aggregate.user_id != user_id):
                return self._fail(BudgetErrors.income_not_found(), income_id=income_id)

            value = CurrencyVO(amount, self.base_currency)
            if not value.is_positive():
                return self._fail(BudgetErrors.income_invalid_amount(), income_id=income_id)

            income.update(
                TransactionChanges(amount=value, recurring=recurring, name=name),
                clock=resolve_clock(self.clock),
            )
            aggregate.update_income(income)

            await self.income_repo.save(aggregate)
            self._log_execution(
                f"Updated income to {income.amount}",
                user_id=aggregate.user_id,
                transaction_id=income.id,
            )
            return Result.ok(income)

        except DomainError as e:
            return self._fail(e)
        except Exception as e:
            self._log_error(e, income_id=income_id)
            raise
