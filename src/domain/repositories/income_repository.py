"""Income repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.aggregates import IncomeAggregate


class IIncomeRepository(ABC):
    """Abstract repository interface for IncomeAggregate."""

    @abstractmethod
    async def find_by_month(self, user_id: str, month: int, year: int) -> IncomeAggregate:
        """
        Load the income of a user for a month.

        Returns:
            IncomeAggregate, empty when the user has no income that month
            or the period is invalid
        """
        pass

    @abstractmethod
    async def find_income_by_id(self, income_id: UUID) -> Optional[IncomeAggregate]:
        """
        Load one income transaction.

        Args:
            income_id: Transaction UUID

        Returns:
            IncomeAggregate of the owner holding only that income, None if
            no income transaction has this id
        """
        pass

    @abstractmethod
    async def save(self, aggregate: IncomeAggregate) -> None:
        """Persist the income changes tracked by the aggregate."""
        pass
