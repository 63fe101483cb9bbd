"""Integration tests for SQLAlchemyIncomeRepository on SQLite."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from domain.aggregates import BudgetAggregate
from domain.clock import FixedClock
from domain.enums import Currency
from domain.value_objects import CurrencyVO
from infrastructure.database.repositories import (
    SQLAlchemyBudgetAggregateRepository,
    SQLAlchemyIncomeRepository,
)
from infrastructure.database.repositories.base_repository import is_valid_period, month_bounds


class TestMonthBounds:
    """Test month range computation."""

    @pytest.mark.parametrize(
        "month,year,start,end",
        [
            (7, 2025, datetime(2025, 7, 1), datetime(2025, 8, 1)),
            (12, 2025, datetime(2025, 12, 1), datetime(2026, 1, 1)),
        ],
    )
    def test_bounds(self, month, year, start, end):
        """Test start inclusive and end exclusive bounds."""
        assert month_bounds(month, year) == (
            start.replace(tzinfo=timezone.utc),
            end.replace(tzinfo=timezone.utc),
        )

    @pytest.mark.parametrize("month,year", [(0, 2025), (13, 2025), (1, 0)])
    def test_invalid_periods(self, month, year):
        """Test that out-of-range months and years are rejected."""
        assert is_valid_period(month, year) is False


class TestIncomeRepository:
    """Test income persistence."""

    async def test_save_and_find_by_month(self, session_factory, fixed_clock):
        """Test that income is found in its month only."""
        async with session_factory() as session:
            repository = SQLAlchemyIncomeRepository(session)
            aggregate = await repository.find_by_month("user-123", 7, 2025)
            assert aggregate.transactions == []
            aggregate.clock = fixed_clock
            aggregate.add_income(CurrencyVO(1000), name="Salary")
            aggregate.add_income(CurrencyVO("250.5"))
            await repository.save(aggregate)
            await session.commit()

        async with session_factory() as session:
            repository = SQLAlchemyIncomeRepository(session)
            july = await repository.find_by_month("user-123", 7, 2025)
            august = await repository.find_by_month("user-123", 8, 2025)
            other_user = await repository.find_by_month("other", 7, 2025)

        assert july.amount.value == Decimal("1250.5")
        assert len(july.transactions) == 2
        assert august.transactions == []
        assert other_user.transactions == []

    async def test_spending_is_not_income(self, session_factory, fixed_clock, valid_budget):
        """Test that budget spending is not loaded as income."""
        budget = BudgetAggregate.create(budget=valid_budget, clock=fixed_clock)
        budget.spend(CurrencyVO(40))
        async with session_factory() as session:
            await SQLAlchemyBudgetAggregateRepository(session).save(budget)
            await session.commit()

        async with session_factory() as session:
            income = await SQLAlchemyIncomeRepository(session).find_by_month("user-123", 7, 2025)
        assert income.transactions == []

    async def test_remove_income(self, session_factory):
        """Test that removed income is deleted."""
        clock = FixedClock(datetime(2025, 3, 31, 23, 59, tzinfo=timezone.utc))
        async with session_factory() as session:
            repository = SQLAlchemyIncomeRepository(session, currency=Currency.USD)
            aggregate = await repository.find_by_month("user-123", 3, 2025)
            aggregate.clock = clock
            aggregate.add_income(CurrencyVO(10, Currency.USD))
            await repository.save(aggregate)
            await session.commit()

        async with session_factory() as session:
            repository = SQLAlchemyIncomeRepository(session, currency=Currency.USD)
            aggregate = await repository.find_by_month("user-123", 3, 2025)
            assert aggregate.amount == CurrencyVO(10, Currency.USD)
            aggregate.remove_income(aggregate.transactions[0])
            await repository.save(aggregate)
            await session.commit()

        async with session_factory() as session:
            aggregate = await SQLAlchemyIncomeRepository(session).find_by_month("user-123", 3, 2025)
        assert aggregate.transactions == []

    async def test_invalid_period_is_empty(self, session_factory):
        """Test that an out-of-range month loads an empty aggregate."""
        async with session_factory() as session:
            aggregate = await SQLAlchemyIncomeRepository(session).find_by_month("user-123", 13, 2025)
        assert aggregate.transactions == []

    async def test_loaded_aggregate_uses_repository_clock(self, session_factory, fixed_clock):
        """Test that income added to a loaded aggregate is stamped by the repository clock."""
        async with session_factory() as session:
            repository = SQLAlchemyIncomeRepository(session, clock=fixed_clock)
            aggregate = await repository.find_by_month("user-123", 7, 2025)
            income = aggregate.add_income(CurrencyVO(500))
            await repository.save(aggregate)
            await session.commit()

        assert income.created_at == fixed_clock.now()
        async with session_factory() as session:
            july = await SQLAlchemyIncomeRepository(session).find_by_month("user-123", 7, 2025)
        assert [t.id for t in july.transactions] == [income.id]


class TestFindIncomeById:
    """Test loading a single income."""

    async def test_finds_income_and_updates_it(self, session_factory, fixed_clock):
        """Test that the owner's aggregate holds only the requested income."""
        async with session_factory() as session:
            repository = SQLAlchemyIncomeRepository(session, clock=fixed_clock)
            aggregate = await repository.find_by_month("user-123", 7, 2025)
            wanted = aggregate.add_income(CurrencyVO(700), name="Salary")
            aggregate.add_income(CurrencyVO(50), name="Gift")
            await repository.save(aggregate)
            await session.commit()

        async with session_factory() as session:
            repository = SQLAlchemyIncomeRepository(session, clock=fixed_clock)
            found = await repository.find_income_by_id(wanted.id)
            assert found.user_id == "user-123"
            assert [t.id for t in found.transactions] == [wanted.id]
            income = found.find_income(wanted.id)
            income.name = "Bonus"
            found.update_income(income)
            await repository.save(found)
            await session.commit()

        async with session_factory() as session:
            reloaded = await SQLAlchemyIncomeRepository(session).find_income_by_id(wanted.id)
        assert reloaded.transactions[0].name == "Bonus"

    async def test_unknown_id(self, session_factory):
        """Test that a missing income yields None."""
        async with session_factory() as session:
            assert await SQLAlchemyIncomeRepository(session).find_income_by_id(uuid4()) is None

    async def test_spending_id_is_not_income(self, session_factory, fixed_clock, valid_budget):
        """Test that a spending transaction is not returned as income."""
        budget = BudgetAggregate.create(budget=valid_budget, clock=fixed_clock)
        spending = budget.spend(CurrencyVO(40))
        async with session_factory() as session:
            await SQLAlchemyBudgetAggregateRepository(session).save(budget)
            await session.commit()

        async with session_factory() as session:
            assert await SQLAlchemyIncomeRepository(session).find_income_by_id(spending.id) is None
