"""Read projection pairing a spending transaction with its budget."""

from dataclasses import dataclass

from domain.entities import BudgetEntity, TransactionEntity, entity_to_dict


@dataclass(frozen=True)
class BudgetSpending:
    """One spending transaction and the budget it was charged to."""

    transaction: TransactionEntity
    budget: BudgetEntity

    def to_dict(self) -> dict:
        return {
            "transaction": entity_to_dict(self.transaction),
            "budget": entity_to_dict(self.budget),
        }
