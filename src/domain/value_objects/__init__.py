"""Domain Value Objects - Immutable objects without identity."""

from .currency_vo import CurrencyVO, to_decimal

__all__ = ["CurrencyVO", "to_decimal"]
