"""Budget entity representing a monthly spending allocation."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.clock import Clock, default_clock, resolve_clock
from domain.enums import BudgetCategory
from domain.errors import BudgetErrors
from domain.value_objects import CurrencyVO


@dataclass(frozen=True)
class BudgetChanges:
    """
    Partial update for a budget.

    ``user_id`` and ``amount`` are deliberately absent: they never change
    after creation, and passing them is a TypeError.
    """

    name: Optional[str] = None
    category: Optional[BudgetCategory] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    month: Optional[int] = None
    year: Optional[int] = None


@dataclass(eq=False)
class BudgetEntity:
    """
    Entity representing a named monthly budget.

    A budget is soft-deleted by archiving: ``archived_at`` holds the time it
    was archived and archived budgets are hidden from every read path.

    Attributes:
        user_id: Owner of the budget (immutable)
        name: Display name
        amount: Allocation ceiling (immutable)
        category: Fixed or flexible
        color: Display color
        icon: Display icon
        month: Month 1-12
        year: Calendar year
        archived_at: Archival time, None while active
    """

    user_id: str
    name: str
    amount: CurrencyVO
    month: int
    year: int
    category: BudgetCategory = BudgetCategory.FLEXIBLE
    color: str = ""
    icon: str = ""
    archived_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=default_clock.now)
    updated_at: datetime = field(default_factory=default_clock.now)

    @classmethod
    def create(
        cls,
        *,
        user_id: str,
        name: str,
        amount: CurrencyVO,
        month: int,
        year: int,
        category: BudgetCategory = BudgetCategory.FLEXIBLE,
        color: str = "",
        icon: str = "",
        id: Optional[UUID] = None,
        clock: Optional[Clock] = None,
    ) -> "BudgetEntity":
        """
        Create a new budget.

        Raises:
            BudgetError: BUDGET_INVALID_AMOUNT when the amount is not positive
        """
        now = resolve_clock(clock).now()
        budget = cls(
            id=id or uuid4(),
            user_id=user_id,
            name=name,
            amount=amount,
            month=month,
            year=year,
            category=category,
            color=color,
            icon=icon,
            created_at=now,
            updated_at=now,
        )
        budget.validate()
        return budget

    def validate(self) -> None:
        """Raise BUDGET_INVALID_AMOUNT unless the amount is positive."""
        if self.amount.value <= 0:
            raise BudgetErrors.budget_invalid_amount()

    def update(self, changes: BudgetChanges, clock: Optional[Clock] = None) -> None:
        """Patch display and categorization fields, bump ``updated_at``."""
        for change in fields(changes):
            value = getattr(changes, change.name)
            if value is not None:
                setattr(self, change.name, value)
        self._mark_updated(clock)

    def archive(self, clock: Optional[Clock] = None) -> None:
        """Archive the budget. Re-archiving overwrites the timestamp."""
        now = resolve_clock(clock).now()
        self.archived_at = now
        self.updated_at = now

    def delete(self, clock: Optional[Clock] = None) -> None:
        """Logical delete, same as ``archive()``."""
        self.archive(clock)

    def is_archived(self) -> bool:
        return self.archived_at is not None

    def is_for_period(self, month: int, year: int) -> bool:
        return self.month == month and self.year == year

    def _mark_updated(self, clock: Optional[Clock] = None) -> None:
        """Mark the entity as updated."""
        self.updated_at = resolve_clock(clock).now()

    def __str__(self) -> str:
        return f"Budget(id={self.id}, name={self.name}, {self.month}/{self.year})"
