"""Unit tests for CurrencyVO value object."""

from decimal import Decimal

import pytest
from domain.enums import Currency
from domain.errors import CommonErrorCode, CurrencyMismatchError
from domain.value_objects import CurrencyVO


class TestCurrencyVOConstruction:
    """Test CurrencyVO construction."""

    def test_defaults_to_base_currency(self):
        """Test that currency defaults to VND."""
        amount = CurrencyVO(100)
        assert amount.currency == Currency.VND
        assert amount.value == Decimal("100")

    def test_value_is_decimal(self):
        """Test that int, str and float inputs become Decimal."""
        assert isinstance(CurrencyVO(10).value, Decimal)
        assert CurrencyVO("25.5").value == Decimal("25.5")
        assert CurrencyVO(0.1).value == Decimal("0.1")

    def test_currency_string_is_coerced(self):
        """Test that a raw currency code is coerced to the enum."""
        assert CurrencyVO(1, "usd").currency == Currency.USD

    def test_negative_and_zero_values_are_accepted(self):
        """Test that construction does not enforce positivity."""
        assert CurrencyVO(-5).value == Decimal("-5")
        assert CurrencyVO(0).is_zero()

    def test_immutability(self):
        """Test that CurrencyVO is immutable (frozen dataclass)."""
        amount = CurrencyVO(100)
        with pytest.raises(Exception):  # FrozenInstanceError
            amount.value = Decimal("200")

    def test_equality_by_value(self):
        """Test that equal value and currency means equal objects."""
        assert CurrencyVO("10.0") == CurrencyVO(10)
        assert CurrencyVO(10, Currency.USD) != CurrencyVO(10, Currency.EUR)


class TestCurrencyVOArithmetic:
    """Test CurrencyVO arithmetic."""

    def test_add_returns_new_instance(self):
        """Test that add returns a new instance with the sum."""
        left = CurrencyVO(50)
        result = left.add(CurrencyVO("25.5"))
        assert result.value == Decimal("75.5")
        assert result is not left
        assert left.value == Decimal("50")

    def test_subtract(self):
        """Test subtraction, including going negative."""
        assert CurrencyVO(500).subtract(CurrencyVO("75.5")).value == Decimal("424.5")
        assert CurrencyVO(10).subtract(CurrencyVO(20)).value == Decimal("-10")

    def test_decimal_arithmetic_has_no_float_drift(self):
        """Test that 0.1 + 0.2 is exactly 0.3."""
        assert CurrencyVO(0.1).add(CurrencyVO(0.2)).value == Decimal("0.3")

    def test_result_keeps_left_currency(self):
        """Test that the result currency is the left operand's."""
        result = CurrencyVO(10, Currency.USD).add(CurrencyVO(5, Currency.USD))
        assert result.currency == Currency.USD

    def test_mismatched_currencies_fail_fast(self):
        """Test that mixing currencies raises CurrencyMismatchError."""
        with pytest.raises(CurrencyMismatchError) as exc_info:
            CurrencyVO(10, Currency.USD).add(CurrencyVO(10, Currency.VND))
        assert exc_info.value.code == CommonErrorCode.CURRENCY_MISMATCH

        with pytest.raises(CurrencyMismatchError):
            CurrencyVO(10, Currency.EUR).subtract(CurrencyVO(1, Currency.USD))

    def test_operators(self):
        """Test + and - operators delegate to add and subtract."""
        assert (CurrencyVO(3) + CurrencyVO(4)).value == Decimal("7")
        assert (CurrencyVO(3) - CurrencyVO(4)).value == Decimal("-1")

    def test_multiply_and_divide(self):
        """Test scaling by plain numbers."""
        assert CurrencyVO(10, Currency.EUR).multiply(3) == CurrencyVO(30, Currency.EUR)
        assert CurrencyVO(10).divide(4).value == Decimal("2.5")

    def test_divide_by_zero(self):
        """Test that dividing by zero is not silently accepted."""
        with pytest.raises(ArithmeticError):
            CurrencyVO(10).divide(0)


class TestCurrencyVOFormatting:
    """Test CurrencyVO formatting and serialization."""

    def test_str_formatting(self):
        """Test __str__ formats with thousands separators."""
        result = str(CurrencyVO(1000000, Currency.USD))
        assert "1,000,000" in result
        assert "USD" in result

    def test_to_dict(self):
        """Test to_dict uses string values."""
        assert CurrencyVO("12.50", Currency.EUR).to_dict() == {
            "value": "12.50",
            "currency": "eur",
        }
