"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from domain.aggregates import BudgetAggregate
from domain.clock import FixedClock
from domain.entities import BudgetEntity, TransactionEntity
from domain.enums import BudgetCategory, Currency, TransactionType
from domain.repositories import IBudgetAggregateRepository, IIncomeRepository
from domain.value_objects import CurrencyVO
from domain.watch_lists import TransactionsWatchList
from infrastructure.database import init_db


FIXED_NOW = datetime(2025, 7, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Fixture for a clock frozen in July 2025."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def make_budget(fixed_clock):
    """Factory fixture for budgets; each call returns a distinct entity."""
    def _make(name="Food", amount=500, user_id="user-123", month=7, year=2025):
        return BudgetEntity.create(
            user_id=user_id,
            name=name,
            amount=CurrencyVO(amount),
            month=month,
            year=year,
            category=BudgetCategory.FLEXIBLE,
            color="#FF5733",
            icon="food",
            clock=fixed_clock,
        )
    return _make


@pytest.fixture
def valid_budget(make_budget):
    """Fixture for a valid budget instance."""
    return make_budget()


@pytest.fixture
def make_transaction(fixed_clock):
    """Factory fixture for spending transactions."""
    def _make(amount="100", user_id="user-123", currency=Currency.VND, **kwargs):
        return TransactionEntity.create(
            user_id=user_id,
            amount=CurrencyVO(Decimal(amount), currency),
            type=kwargs.pop("type", TransactionType.BUDGET_SPENDING),
            clock=fixed_clock,
            **kwargs,
        )
    return _make


@pytest.fixture
def empty_aggregate(valid_budget, fixed_clock):
    """Fixture for a freshly created budget aggregate."""
    return BudgetAggregate.create(budget=valid_budget, clock=fixed_clock)


@pytest.fixture
def loaded_aggregate(make_budget, make_transaction, fixed_clock):
    """Fixture for an aggregate over its own budget with one baseline transaction of 100."""
    baseline = make_transaction("100", name="Groceries")
    return BudgetAggregate.create(
        budget=make_budget(),
        spending=TransactionsWatchList([baseline]),
        clock=fixed_clock,
    )


@pytest.fixture
def budget_repository():
    """Fixture for a mocked budget aggregate repository."""
    repository = AsyncMock(spec=IBudgetAggregateRepository)
    repository.find_by_id.return_value = None
    repository.find_one.return_value = None
    repository.find_many.return_value = []
    repository.find_spending_by_month.return_value = []
    return repository


@pytest.fixture
def income_repository():
    """Fixture for a mocked income repository."""
    repository = AsyncMock(spec=IIncomeRepository)
    repository.find_income_by_id.return_value = None
    return repository


@pytest.fixture
async def db_engine():
    """Fixture for an in-memory SQLite engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Fixture for a session factory bound to the test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
