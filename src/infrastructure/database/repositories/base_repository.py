"""Shared mapping and write-set logic for transaction-owning repositories."""

from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from domain.clock import Clock, resolve_clock
from domain.entities import TransactionEntity
from domain.enums import Currency, TransactionType
from domain.value_objects import CurrencyVO
from domain.watch_lists import TransactionsWatchList
from infrastructure.config import get_logger
from infrastructure.database.models import BudgetTransactionModel, TransactionModel


def is_valid_period(month: int, year: int) -> bool:
    return 1 <= month <= 12 and year > 0


def month_bounds(month: int, year: int) -> tuple[datetime, datetime]:
    """First instant of the month and of the following month, in UTC."""
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end


class BaseSQLAlchemyRepository:
    """Base class holding the session and transaction row helpers."""
    
    def __init__(self, session: AsyncSession, clock: Optional[Clock] = None):
        """Initialize repository with database session and the clock handed to loaded aggregates."""
        self.session = session
        self.clock = resolve_clock(clock)
        self.logger = get_logger(self.__class__.__name__)
    
    async def _apply_transaction_changes(self, watch_list: TransactionsWatchList) -> list[TransactionEntity]:
        """
        Write the watch list diff: insert added, update updated, delete removed.
        
        Returns:
            The inserted transactions, for callers that link them elsewhere
        """
        added = watch_list.added_items
        for transaction in added:
            self.session.add(self._transaction_to_model(transaction))
        
        for transaction in watch_list.updated_items:
            model = await self.session.get(TransactionModel, transaction.id)
            if model is None:
                raise ValueError(f"Transaction {transaction.id} not found")
            self._update_transaction_model(model, transaction)
        
        removed_ids = [transaction.id for transaction in watch_list.removed_items]
        if removed_ids:
            await self.session.execute(
                delete(BudgetTransactionModel).where(
                    BudgetTransactionModel.transaction_id.in_(removed_ids)
                )
            )
            await self.session.execute(
                delete(TransactionModel).where(TransactionModel.id.in_(removed_ids))
            )
        
        await self.session.flush()
        self.logger.debug(
            f"Transactions written: {len(added)} inserted, "
            f"{len(watch_list.updated_items)} updated, {len(removed_ids)} deleted"
        )
        return added
    
    def _transaction_to_model(self, entity: TransactionEntity) -> TransactionModel:
        """Convert domain entity to ORM model."""
        return TransactionModel(
            id=entity.id,
            user_id=entity.user_id,
            amount=entity.amount.value,
            currency=entity.amount.currency.value,
            type=entity.type.value,
            recurring=entity.recurring,
            name=entity.name,
            description=entity.description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
    
    def _update_transaction_model(self, model: TransactionModel, entity: TransactionEntity) -> None:
        """Update ORM model from domain entity."""
        model.amount = entity.amount.value
        model.currency = entity.amount.currency.value
        model.type = entity.type.value
        model.recurring = entity.recurring
        model.name = entity.name
        model.description = entity.description
        model.updated_at = entity.updated_at
    
    def _model_to_transaction(self, model: TransactionModel) -> TransactionEntity:
        """Convert ORM model to domain entity."""
        return TransactionEntity(
            id=model.id,
            user_id=model.user_id,
            amount=CurrencyVO(model.amount, Currency(model.currency)),
            type=TransactionType(model.type),
            recurring=model.recurring,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
