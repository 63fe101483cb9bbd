"""Read projection of a budget with its spending totals."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from domain.aggregates import BudgetAggregate
from domain.entities import BudgetEntity, entity_to_dict
from domain.value_objects import CurrencyVO


@dataclass(frozen=True)
class BudgetWithSpending:
    """Budget plus derived spending figures."""

    budget: BudgetEntity
    total_spent: CurrencyVO
    transaction_count: int
    remaining_amount: CurrencyVO
    spent_percentage: Decimal

    @classmethod
    def from_aggregate(cls, aggregate: BudgetAggregate) -> "BudgetWithSpending":
        total_budget = aggregate.total_budget
        spent = aggregate.spent

        percentage = Decimal("0")
        if total_budget.is_positive():
            percentage = (spent.value / total_budget.value * 100).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )

        return cls(
            budget=aggregate.budget,
            total_spent=spent,
            transaction_count=len(aggregate.watch_list),
            remaining_amount=aggregate.remaining_budget,
            spent_percentage=percentage,
        )

    def to_dict(self) -> dict:
        return {
            **entity_to_dict(self.budget),
            "total_spent": self.total_spent.to_dict(),
            "transaction_count": self.transaction_count,
            "remaining_amount": self.remaining_amount.to_dict(),
            "spent_percentage": str(self.spent_percentage),
        }
