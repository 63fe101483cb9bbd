"""Budget categories."""

from enum import Enum


class BudgetCategory(str, Enum):
    """How a budget behaves month to month."""

    FIXED = "fixed"
    FLEXIBLE = "flexible"

    def __str__(self) -> str:
        return self.value
