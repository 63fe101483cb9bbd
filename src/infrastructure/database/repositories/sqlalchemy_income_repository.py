"""SQLAlchemy implementation of income repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.aggregates import IncomeAggregate
from domain.clock import Clock
from domain.entities import TransactionEntity
from domain.enums import BASE_CURRENCY, Currency, TransactionType
from domain.repositories import IIncomeRepository
from domain.watch_lists import TransactionsWatchList
from infrastructure.database.models import TransactionModel
from .base_repository import BaseSQLAlchemyRepository, is_valid_period, month_bounds


class SQLAlchemyIncomeRepository(BaseSQLAlchemyRepository, IIncomeRepository):
    """Concrete implementation of IIncomeRepository using SQLAlchemy."""

    def __init__(
        self,
        session: AsyncSession,
        currency: Currency = BASE_CURRENCY,
        clock: Optional[Clock] = None,
    ):
        super().__init__(session, clock=clock)
        self.currency = currency

    async def find_by_month(self, user_id: str, month: int, year: int) -> IncomeAggregate:
        """Load income transactions created during the month."""
        if not is_valid_period(month, year):
            return self._to_aggregate(user_id, [])

        start, end = month_bounds(month, year)
        stmt = (
            select(TransactionModel)
            .where(
                TransactionModel.user_id == user_id,
                TransactionModel.type == TransactionType.INCOME.value,
                TransactionModel.created_at >= start,
                TransactionModel.created_at < end,
            )
            .order_by(TransactionModel.created_at)
        )
        result = await self.session.execute(stmt)
        transactions = [self._model_to_transaction(model) for model in result.scalars().all()]

        return self._to_aggregate(user_id, transactions)

    async def find_income_by_id(self, income_id: UUID) -> Optional[IncomeAggregate]:
        """Load a single income transaction as its owner's aggregate."""
        model = await self.session.get(TransactionModel, income_id)

        if model is None or model.type != TransactionType.INCOME.value:
            return None

        return self._to_aggregate(model.user_id, [self._model_to_transaction(model)])

    async def save(self, aggregate: IncomeAggregate) -> None:
        """Write the income diff."""
        await self._apply_transaction_changes(aggregate.watch_list)
        self.logger.info(f"Saved income for user {aggregate.user_id}")

    def _to_aggregate(self, user_id: str, transactions: list[TransactionEntity]) -> IncomeAggregate:
        return IncomeAggregate(
            user_id=user_id,
            watch_list=TransactionsWatchList(transactions),
            currency=self.currency,
            clock=self.clock,
        )
