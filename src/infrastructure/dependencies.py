"""Dependency wiring: repositories and use cases bound to a session."""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from application.use_cases import (
    AddIncomeUseCase,
    CreateBudgetUseCase,
    DeleteBudgetUseCase,
    DeleteSpendingUseCase,
    GetBudgetDetailUseCase,
    GetBudgetsByMonthUseCase,
    GetBudgetsWithSpendingUseCase,
    GetIncomeByMonthUseCase,
    GetMonthlySpendingUseCase,
    RemoveIncomeUseCase,
    SpendUseCase,
    UpdateBudgetUseCase,
    UpdateIncomeUseCase,
)
from domain.clock import Clock
from domain.repositories import IBudgetAggregateRepository, IIncomeRepository
from infrastructure.config import Settings, get_settings, setup_logger
from infrastructure.database import close_db, init_db
from infrastructure.database.repositories import (
    SQLAlchemyBudgetAggregateRepository,
    SQLAlchemyIncomeRepository,
)


# Repository dependencies
def get_budget_repository(
    session: AsyncSession,
    clock: Optional[Clock] = None,
) -> IBudgetAggregateRepository:
    """Get budget aggregate repository dependency."""
    return SQLAlchemyBudgetAggregateRepository(session, clock=clock)


def get_income_repository(
    session: AsyncSession,
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> IIncomeRepository:
    """Get income repository dependency."""
    settings = settings or get_settings()
    return SQLAlchemyIncomeRepository(session, currency=settings.base_currency, clock=clock)


# Use case dependencies
def get_create_budget_use_case(
    session: AsyncSession,
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> CreateBudgetUseCase:
    """Get create budget use case dependency."""
    settings = settings or get_settings()
    return CreateBudgetUseCase(
        budget_repository=get_budget_repository(session, clock),
        base_currency=settings.base_currency,
        clock=clock,
    )


def get_budget_detail_use_case(session: AsyncSession) -> GetBudgetDetailUseCase:
    return GetBudgetDetailUseCase(get_budget_repository(session))


def get_budgets_by_month_use_case(session: AsyncSession) -> GetBudgetsByMonthUseCase:
    return GetBudgetsByMonthUseCase(get_budget_repository(session))


def get_budgets_with_spending_use_case(session: AsyncSession) -> GetBudgetsWithSpendingUseCase:
    return GetBudgetsWithSpendingUseCase(get_budget_repository(session))


def get_monthly_spending_use_case(session: AsyncSession) -> GetMonthlySpendingUseCase:
    return GetMonthlySpendingUseCase(get_budget_repository(session))


def get_update_budget_use_case(
    session: AsyncSession,
    clock: Optional[Clock] = None,
) -> UpdateBudgetUseCase:
    return UpdateBudgetUseCase(get_budget_repository(session, clock), clock=clock)


def get_spend_use_case(
    session: AsyncSession,
    clock: Optional[Clock] = None,
) -> SpendUseCase:
    return SpendUseCase(get_budget_repository(session, clock), clock=clock)


def get_delete_budget_use_case(
    session: AsyncSession,
    clock: Optional[Clock] = None,
) -> DeleteBudgetUseCase:
    return DeleteBudgetUseCase(get_budget_repository(session, clock), clock=clock)


def get_delete_spending_use_case(session: AsyncSession) -> DeleteSpendingUseCase:
    return DeleteSpendingUseCase(get_budget_repository(session))


def get_add_income_use_case(
    session: AsyncSession,
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> AddIncomeUseCase:
    settings = settings or get_settings()
    return AddIncomeUseCase(
        income_repository=get_income_repository(session, settings, clock),
        base_currency=settings.base_currency,
        clock=clock,
    )


def get_update_income_use_case(
    session: AsyncSession,
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> UpdateIncomeUseCase:
    settings = settings or get_settings()
    return UpdateIncomeUseCase(
        income_repository=get_income_repository(session, settings, clock),
        base_currency=settings.base_currency,
        clock=clock,
    )


def get_remove_income_use_case(
    session: AsyncSession,
    settings: Optional[Settings] = None,
) -> RemoveIncomeUseCase:
    return RemoveIncomeUseCase(get_income_repository(session, settings))


def get_income_by_month_use_case(
    session: AsyncSession,
    settings: Optional[Settings] = None,
) -> GetIncomeByMonthUseCase:
    return GetIncomeByMonthUseCase(get_income_repository(session, settings))


# Lifecycle
async def startup(settings: Optional[Settings] = None) -> None:
    """Configure logging and make sure the schema exists."""
    settings = settings or get_settings()
    setup_logger(level=settings.log_level, log_format=settings.log_format)
    await init_db()


async def shutdown() -> None:
    """Release database resources."""
    await close_db()
