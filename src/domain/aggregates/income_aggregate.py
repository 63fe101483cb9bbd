"""Income aggregate: a user's income transactions for a period."""

from dataclasses import dataclass, field
from typing import Optional

from domain.clock import Clock, default_clock
from domain.entities import TransactionEntity
from domain.enums import BASE_CURRENCY, Currency, TransactionType
from domain.errors import BudgetErrors
from domain.value_objects import CurrencyVO
from domain.watch_lists import TransactionsWatchList


@dataclass(eq=False)
class IncomeAggregate:
    """Tracks income transactions for one user."""

    user_id: str
    watch_list: TransactionsWatchList = field(default_factory=TransactionsWatchList)
    currency: Currency = BASE_CURRENCY
    clock: Clock = field(default=default_clock, repr=False)

    @property
    def transactions(self) -> list[TransactionEntity]:
        return self.watch_list.items

    @property
    def amount(self) -> CurrencyVO:
        """Total income."""
        total = CurrencyVO.zero(self.currency)
        for transaction in self.watch_list.items:
            total = total.add(transaction.amount)
        return total

    def add_income(
        self,
        amount: CurrencyVO,
        recurring: int = 0,
        name: str = "Income",
    ) -> TransactionEntity:
        """
        Record an income transaction.

        Raises:
            BudgetError: INCOME_INVALID_AMOUNT when the amount is not positive
        """
        if not amount.is_positive():
            raise BudgetErrors.income_invalid_amount()

        transaction = TransactionEntity.create(
            user_id=self.user_id,
            amount=amount,
            type=TransactionType.INCOME,
            name=name,
            description="Income",
            recurring=recurring,
            clock=self.clock,
        )
        self.watch_list.add(transaction)
        return transaction

    def remove_income(self, transaction: TransactionEntity) -> None:
        self.watch_list.remove(transaction)

    def update_income(self, transaction: TransactionEntity) -> None:
        self.watch_list.update(transaction)

    def find_income(self, transaction_id) -> Optional[TransactionEntity]:
        return self.watch_list.find(transaction_id)
