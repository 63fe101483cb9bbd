"""Identity helpers shared by entities.

Entities are plain dataclasses declared with ``eq=False`` and an ``id``
field; these free functions provide identity equality and serialization.
"""

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID

from domain.value_objects import CurrencyVO


def same_entity(left: Optional[Any], right: Optional[Any]) -> bool:
    """Check whether two entities share the same identity."""
    if left is None or right is None:
        return False
    if left is right:
        return True
    if type(left) is not type(right):
        return False
    return left.id == right.id


def _serialize(value: Any) -> Any:
    if isinstance(value, CurrencyVO):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if is_dataclass(value) and not isinstance(value, type):
        return entity_to_dict(value)
    return value


def entity_to_dict(entity: Any) -> dict:
    """Convert an entity dataclass to a JSON-friendly dictionary."""
    return {f.name: _serialize(getattr(entity, f.name)) for f in fields(entity)}
