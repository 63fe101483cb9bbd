"""Monetary value object."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from domain.enums import Currency, BASE_CURRENCY
from domain.errors import CurrencyMismatchError


Number = Union[int, float, str, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Coerce a number to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class CurrencyVO:
    """
    Immutable value object representing an amount of money.

    Construction never rejects negative or zero values: positivity is a
    business rule checked by the entities that give the amount meaning.

    Attributes:
        value: Amount as a Decimal
        currency: Currency code (default: VND)
    """

    value: Decimal
    currency: Currency = field(default=BASE_CURRENCY)

    def __post_init__(self) -> None:
        """Normalize value and currency."""
        object.__setattr__(self, "value", to_decimal(self.value))
        object.__setattr__(self, "currency", Currency(self.currency))

    @classmethod
    def zero(cls, currency: Currency = BASE_CURRENCY) -> "CurrencyVO":
        """Zero amount in the given currency."""
        return cls(Decimal("0"), currency)

    def add(self, other: "CurrencyVO") -> "CurrencyVO":
        """Return the sum; the result keeps this amount's currency."""
        self._ensure_same_currency(other)
        return CurrencyVO(self.value + other.value, self.currency)

    def subtract(self, other: "CurrencyVO") -> "CurrencyVO":
        """Return the difference; the result keeps this amount's currency."""
        self._ensure_same_currency(other)
        return CurrencyVO(self.value - other.value, self.currency)

    def multiply(self, factor: Number) -> "CurrencyVO":
        return CurrencyVO(self.value * to_decimal(factor), self.currency)

    def divide(self, divisor: Number) -> "CurrencyVO":
        return CurrencyVO(self.value / to_decimal(divisor), self.currency)

    def is_positive(self) -> bool:
        return self.value > 0

    def is_zero(self) -> bool:
        return self.value == 0

    def to_dict(self) -> dict:
        """Convert amount to dictionary."""
        return {"value": str(self.value), "currency": self.currency.value}

    def _ensure_same_currency(self, other: "CurrencyVO") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.value, other.currency.value)

    def __add__(self, other: "CurrencyVO") -> "CurrencyVO":
        return self.add(other)

    def __sub__(self, other: "CurrencyVO") -> "CurrencyVO":
        return self.subtract(other)

    def __str__(self) -> str:
        return f"{self.value:,} {self.currency.value.upper()}"
