"""Unit tests for BudgetEntity."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from domain.clock import FixedClock
from domain.entities import BudgetChanges, BudgetEntity
from domain.enums import BudgetCategory, Currency
from domain.errors import BudgetError, BudgetErrorCode
from domain.value_objects import CurrencyVO


def create_budget(amount, clock=None, **kwargs):
    return BudgetEntity.create(
        user_id=kwargs.pop("user_id", "user-123"),
        name=kwargs.pop("name", "Food"),
        amount=amount,
        month=kwargs.pop("month", 1),
        year=kwargs.pop("year", 2024),
        clock=clock,
        **kwargs,
    )


class TestBudgetCreation:
    """Test BudgetEntity.create."""

    def test_create_with_all_properties(self, fixed_clock):
        """Test creating a budget with every field."""
        budget = create_budget(
            CurrencyVO(1000, Currency.USD),
            clock=fixed_clock,
            category=BudgetCategory.FIXED,
            color="#33FF57",
            icon="transport",
        )
        assert budget.name == "Food"
        assert budget.amount.value == Decimal("1000")
        assert budget.amount.currency == Currency.USD
        assert budget.category == BudgetCategory.FIXED
        assert budget.color == "#33FF57"
        assert budget.archived_at is None
        assert budget.created_at == fixed_clock.now()

    def test_create_with_custom_id(self):
        """Test that a provided id is kept."""
        custom_id = uuid4()
        assert create_budget(CurrencyVO(1), id=custom_id).id == custom_id

    def test_negative_amount_raises(self):
        """Test that a negative amount raises BUDGET_INVALID_AMOUNT."""
        with pytest.raises(BudgetError) as exc_info:
            create_budget(CurrencyVO(-1))
        assert exc_info.value.code == BudgetErrorCode.BUDGET_INVALID_AMOUNT

    def test_zero_amount_raises(self):
        """Test that zero-amount budgets are rejected like zero transactions."""
        with pytest.raises(BudgetError) as exc_info:
            create_budget(CurrencyVO(0))
        assert exc_info.value.code == BudgetErrorCode.BUDGET_INVALID_AMOUNT
        assert exc_info.value.message == "Budget amount must be greater than 0"

    def test_validate_rechecks_amount(self, valid_budget):
        """Test that validate() fails for an amount that became invalid."""
        valid_budget.validate()
        valid_budget.amount = CurrencyVO(0)
        with pytest.raises(BudgetError):
            valid_budget.validate()


class TestBudgetUpdate:
    """Test BudgetEntity.update."""

    def test_update_patches_display_fields(self, valid_budget):
        """Test that provided fields are changed and others kept."""
        valid_budget.update(BudgetChanges(name="Groceries", color="#000000"))
        assert valid_budget.name == "Groceries"
        assert valid_budget.color == "#000000"
        assert valid_budget.icon == "food"

    def test_update_bumps_updated_at(self, valid_budget):
        """Test that update moves updated_at only."""
        later = FixedClock(datetime(2025, 9, 1, tzinfo=timezone.utc))
        created_at = valid_budget.created_at
        valid_budget.update(BudgetChanges(month=8), clock=later)
        assert valid_budget.month == 8
        assert valid_budget.updated_at == later.now()
        assert valid_budget.created_at == created_at

    @pytest.mark.parametrize("field", ["user_id", "amount", "created_at", "updated_at"])
    def test_forbidden_fields_rejected(self, field):
        """Test that immutable fields cannot be put in a change set."""
        with pytest.raises(TypeError):
            BudgetChanges(**{field: "x"})


class TestBudgetArchive:
    """Test archival (soft delete)."""

    def test_new_budget_is_active(self, valid_budget):
        """Test that a new budget is not archived."""
        assert valid_budget.is_archived() is False

    def test_archive_sets_timestamp(self, valid_budget, fixed_clock):
        """Test that archive() sets archived_at."""
        valid_budget.archive(clock=fixed_clock)
        assert valid_budget.is_archived() is True
        assert valid_budget.archived_at == fixed_clock.now()

    def test_archive_is_idempotent_and_keeps_last_timestamp(self, valid_budget):
        """Test that archiving twice keeps the second timestamp."""
        first = FixedClock(datetime(2025, 7, 20, tzinfo=timezone.utc))
        second = FixedClock(datetime(2025, 7, 21, tzinfo=timezone.utc))
        valid_budget.archive(clock=first)
        valid_budget.archive(clock=second)
        assert valid_budget.is_archived() is True
        assert valid_budget.archived_at == second.now()

    def test_delete_is_archive(self, valid_budget, fixed_clock):
        """Test that delete() is a logical delete."""
        valid_budget.delete(clock=fixed_clock)
        assert valid_budget.archived_at == fixed_clock.now()
