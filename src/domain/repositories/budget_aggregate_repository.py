"""Budget aggregate repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.aggregates import BudgetAggregate
from domain.projections import BudgetSpending


class IBudgetAggregateRepository(ABC):
    """
    Abstract repository interface for BudgetAggregate.

    ``save`` must read the aggregate's watch list: added transactions are
    inserted (together with their budget link), updated ones are updated and
    removed ones are deleted. Scalar budget fields are upserted.
    Concrete implementations will be in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, budget_id: UUID) -> Optional[BudgetAggregate]:
        """
        Retrieve a budget aggregate by ID, archived or not.

        Args:
            budget_id: Budget UUID

        Returns:
            BudgetAggregate if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_one(
        self,
        user_id: str,
        name: str,
        month: int,
        year: int,
    ) -> Optional[BudgetAggregate]:
        """
        Retrieve an active budget by its natural key.

        Returns:
            BudgetAggregate if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(
        self,
        user_id: str,
        month: int,
        year: int,
    ) -> list[BudgetAggregate]:
        """
        Retrieve the active budgets of a user for a month.

        Returns:
            List of BudgetAggregate, possibly empty
        """
        pass

    @abstractmethod
    async def find_spending_by_month(
        self,
        user_id: str,
        month: int,
        year: int,
    ) -> list[BudgetSpending]:
        """
        Retrieve the budget spending a user recorded during a month.

        Spending on archived budgets is included; an invalid period yields
        an empty list.

        Returns:
            List of BudgetSpending ordered by transaction time
        """
        pass

    @abstractmethod
    async def save(self, aggregate: BudgetAggregate) -> None:
        """
        Persist a budget aggregate and its spending changes.

        Args:
            aggregate: Aggregate loaded (or created) in this unit of work
        """
        pass
