"""Domain Entities - Objects with identity."""

from .transaction import TransactionEntity, TransactionChanges
from .budget import BudgetEntity, BudgetChanges
from .identity import same_entity, entity_to_dict

__all__ = [
    "TransactionEntity",
    "TransactionChanges",
    "BudgetEntity",
    "BudgetChanges",
    "same_entity",
    "entity_to_dict",
]
