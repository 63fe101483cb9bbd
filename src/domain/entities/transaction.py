"""Transaction entity representing a single money movement."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.clock import Clock, default_clock, resolve_clock
from domain.enums import TransactionType
from domain.errors import BudgetErrors
from domain.value_objects import CurrencyVO


@dataclass(frozen=True)
class TransactionChanges:
    """
    Partial update for a transaction.

    Only the fields listed here may change after creation; ``None`` means
    "leave as is".
    """

    amount: Optional[CurrencyVO] = None
    name: Optional[str] = None
    description: Optional[str] = None
    recurring: Optional[int] = None
    type: Optional[TransactionType] = None


@dataclass(eq=False)
class TransactionEntity:
    """
    Entity representing income, spending or a transfer.

    Attributes:
        user_id: Owner of the transaction
        amount: Amount moved
        type: Kind of movement
        recurring: Recurrence interval in days (0 = one-off)
        name: Short label
        description: Free text description
    """

    user_id: str
    amount: CurrencyVO
    type: TransactionType = TransactionType.OUTCOME
    recurring: int = 0
    name: str = ""
    description: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=default_clock.now)
    updated_at: datetime = field(default_factory=default_clock.now)

    @classmethod
    def create(
        cls,
        *,
        user_id: str,
        amount: CurrencyVO,
        type: TransactionType,
        name: str = "",
        description: str = "",
        recurring: int = 0,
        id: Optional[UUID] = None,
        clock: Optional[Clock] = None,
    ) -> "TransactionEntity":
        """
        Create a new transaction.

        No validation runs here; call ``validate()`` where a positive amount
        is required.
        """
        now = resolve_clock(clock).now()
        return cls(
            id=id or uuid4(),
            user_id=user_id,
            amount=amount,
            type=type,
            name=name,
            description=description,
            recurring=recurring,
            created_at=now,
            updated_at=now,
        )

    def validate(self) -> None:
        """Raise BUDGET_INVALID_AMOUNT unless the amount is positive."""
        if self.amount.value <= 0:
            raise BudgetErrors.transaction_invalid_amount()

    def update(self, changes: TransactionChanges, clock: Optional[Clock] = None) -> None:
        """Merge the provided fields and bump ``updated_at``."""
        for change in fields(changes):
            value = getattr(changes, change.name)
            if value is not None:
                setattr(self, change.name, value)
        self._mark_updated(clock)

    def is_spending(self) -> bool:
        return self.type == TransactionType.BUDGET_SPENDING

    def _mark_updated(self, clock: Optional[Clock] = None) -> None:
        """Mark the entity as updated."""
        self.updated_at = resolve_clock(clock).now()

    def __str__(self) -> str:
        return f"Transaction(id={self.id}, type={self.type.value}, amount={self.amount})"
