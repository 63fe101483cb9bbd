"""Budget aggregate: a budget and the spending recorded against it."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from domain.clock import Clock, default_clock
from domain.entities import BudgetEntity, TransactionEntity
from domain.enums import TransactionType
from domain.value_objects import CurrencyVO
from domain.watch_lists import TransactionsWatchList


DEFAULT_SPENDING_NAME = "Spending"


@dataclass(eq=False)
class BudgetAggregate:
    """
    Aggregate root composing one budget with its spending transactions.

    The aggregate never touches persistence. ``spent`` and
    ``remaining_budget`` are recomputed from the watch list on every access.
    """

    budget: BudgetEntity
    watch_list: TransactionsWatchList = field(default_factory=TransactionsWatchList)
    clock: Clock = field(default=default_clock, repr=False)

    @classmethod
    def create(
        cls,
        budget: BudgetEntity,
        spending: Optional[TransactionsWatchList] = None,
        clock: Optional[Clock] = None,
    ) -> "BudgetAggregate":
        return cls(
            budget=budget,
            watch_list=spending if spending is not None else TransactionsWatchList(),
            clock=clock or default_clock,
        )

    @property
    def id(self) -> UUID:
        return self.budget.id

    @property
    def user_id(self) -> str:
        return self.budget.user_id

    @property
    def spending(self) -> list[TransactionEntity]:
        """Current spending transactions."""
        return self.watch_list.items

    @property
    def spent(self) -> CurrencyVO:
        total = CurrencyVO.zero(self.budget.amount.currency)
        for transaction in self.watch_list.items:
            total = total.add(transaction.amount)
        return total

    @property
    def total_budget(self) -> CurrencyVO:
        return self.budget.amount

    @property
    def remaining_budget(self) -> CurrencyVO:
        return self.total_budget.subtract(self.spent)

    def validate(self) -> None:
        """Validate the budget amount."""
        self.budget.validate()

    def is_archived(self) -> bool:
        return self.budget.is_archived()

    def belongs_to(self, user_id: str) -> bool:
        return self.budget.user_id == user_id

    def spend(
        self,
        amount: CurrencyVO,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: Optional[int] = None,
    ) -> TransactionEntity:
        """
        Record spending against the budget.

        Args:
            amount: Amount spent
            name: Label (default: "Spending")
            description: Description (default: "Spending for <budget name>")
            recurring: Recurrence interval in days (default: 0)

        Returns:
            The created transaction, already tracked as added
        """
        transaction = TransactionEntity.create(
            user_id=self.budget.user_id,
            amount=amount,
            type=TransactionType.BUDGET_SPENDING,
            name=name or DEFAULT_SPENDING_NAME,
            description=description or f"Spending for {self.budget.name}",
            recurring=recurring or 0,
            clock=self.clock,
        )
        self.watch_list.add(transaction)
        return transaction

    def find_spending(self, transaction_id: UUID) -> Optional[TransactionEntity]:
        return self.watch_list.find(transaction_id)

    def remove_spending(self, transaction: TransactionEntity) -> None:
        self.watch_list.remove(transaction)

    def update_spending(self, transaction: TransactionEntity) -> None:
        self.watch_list.update(transaction)

    def __str__(self) -> str:
        return f"BudgetAggregate(budget={self.budget.id}, spending={len(self.watch_list)})"
