"""Currency codes supported for monetary amounts."""

from enum import Enum


class Currency(str, Enum):
    """ISO-like currency codes, stored lowercase."""

    USD = "usd"
    EUR = "eur"
    VND = "vnd"

    def __str__(self) -> str:
        return self.value


BASE_CURRENCY = Currency.VND
