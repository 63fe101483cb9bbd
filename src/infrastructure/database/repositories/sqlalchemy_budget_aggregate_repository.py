"""SQLAlchemy implementation of budget aggregate repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID
from sqlalchemy import select

from domain.aggregates import BudgetAggregate
from domain.entities import BudgetEntity
from domain.enums import BudgetCategory, Currency, TransactionType
from domain.projections import BudgetSpending
from domain.repositories import IBudgetAggregateRepository
from domain.value_objects import CurrencyVO
from domain.watch_lists import TransactionsWatchList
from infrastructure.database.models import BudgetModel, BudgetTransactionModel, TransactionModel
from .base_repository import BaseSQLAlchemyRepository, is_valid_period, month_bounds


class SQLAlchemyBudgetAggregateRepository(BaseSQLAlchemyRepository, IBudgetAggregateRepository):
    """Concrete implementation of IBudgetAggregateRepository using SQLAlchemy."""
    
    async def find_by_id(self, budget_id: UUID) -> Optional[BudgetAggregate]:
        """Retrieve a budget aggregate by ID."""
        model = await self.session.get(BudgetModel, budget_id)
        
        if model is None:
            return None
        
        aggregates = await self._to_aggregates([model])
        return aggregates[0]
    
    async def find_one(
        self,
        user_id: str,
        name: str,
        month: int,
        year: int,
    ) -> Optional[BudgetAggregate]:
        """Retrieve an active budget by user, name and period."""
        stmt = (
            select(BudgetModel)
            .where(
                BudgetModel.user_id == user_id,
                BudgetModel.name == name,
                BudgetModel.month == month,
                BudgetModel.year == year,
                BudgetModel.archived_at.is_(None),
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        
        if model is None:
            return None
        
        aggregates = await self._to_aggregates([model])
        return aggregates[0]
    
    async def find_many(self, user_id: str, month: int, year: int) -> list[BudgetAggregate]:
        """Retrieve the active budgets of a user for a month."""
        stmt = (
            select(BudgetModel)
            .where(
                BudgetModel.user_id == user_id,
                BudgetModel.month == month,
                BudgetModel.year == year,
                BudgetModel.archived_at.is_(None),
            )
            .order_by(BudgetModel.created_at)
        )
        result = await self.session.execute(stmt)
        return await self._to_aggregates(list(result.scalars().all()))
    
    async def find_spending_by_month(self, user_id: str, month: int, year: int) -> list[BudgetSpending]:
        """Retrieve spending of a month together with the budget it belongs to."""
        if not is_valid_period(month, year):
            return []
        
        start, end = month_bounds(month, year)
        stmt = (
            select(TransactionModel, BudgetModel)
            .join(BudgetTransactionModel, BudgetTransactionModel.transaction_id == TransactionModel.id)
            .join(BudgetModel, BudgetModel.id == BudgetTransactionModel.budget_id)
            .where(
                TransactionModel.user_id == user_id,
                TransactionModel.type == TransactionType.BUDGET_SPENDING.value,
                TransactionModel.created_at >= start,
                TransactionModel.created_at < end,
            )
            .order_by(TransactionModel.created_at)
        )
        result = await self.session.execute(stmt)
        
        return [
            BudgetSpending(
                transaction=self._model_to_transaction(transaction_model),
                budget=self._model_to_budget(budget_model),
            )
            for transaction_model, budget_model in result.all()
        ]
    
    async def save(self, aggregate: BudgetAggregate) -> None:
        """Upsert the budget and write the spending diff."""
        model = await self.session.get(BudgetModel, aggregate.id)
        if model is None:
            self.session.add(self._budget_to_model(aggregate.budget))
        else:
            self._update_budget_model(model, aggregate.budget)
        await self.session.flush()
        
        added = await self._apply_transaction_changes(aggregate.watch_list)
        
        for transaction in added:
            self.session.add(
                BudgetTransactionModel(budget_id=aggregate.id, transaction_id=transaction.id)
            )
        await self.session.flush()
        
        self.logger.info(f"Saved budget {aggregate.id}")
    
    async def _to_aggregates(self, models: list[BudgetModel]) -> list[BudgetAggregate]:
        """Load spending for the given budgets with a single query."""
        if not models:
            return []
        
        stmt = (
            select(BudgetTransactionModel.budget_id, TransactionModel)
            .join(TransactionModel, TransactionModel.id == BudgetTransactionModel.transaction_id)
            .where(BudgetTransactionModel.budget_id.in_([model.id for model in models]))
            .order_by(TransactionModel.created_at)
        )
        result = await self.session.execute(stmt)
        
        spending_by_budget = defaultdict(list)
        for budget_id, transaction_model in result.all():
            spending_by_budget[budget_id].append(self._model_to_transaction(transaction_model))
        
        return [
            BudgetAggregate.create(
                budget=self._model_to_budget(model),
                spending=TransactionsWatchList(spending_by_budget[model.id]),
                clock=self.clock,
            )
            for model in models
        ]
    
    def _budget_to_model(self, entity: BudgetEntity) -> BudgetModel:
        """Convert domain entity to ORM model."""
        return BudgetModel(
            id=entity.id,
            user_id=entity.user_id,
            name=entity.name,
            amount=entity.amount.value,
            currency=entity.amount.currency.value,
            category=entity.category.value,
            color=entity.color,
            icon=entity.icon,
            month=entity.month,
            year=entity.year,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            archived_at=entity.archived_at,
        )
    
    def _update_budget_model(self, model: BudgetModel, entity: BudgetEntity) -> None:
        """Update ORM model from domain entity; user and amount never change."""
        model.name = entity.name
        model.category = entity.category.value
        model.color = entity.color
        model.icon = entity.icon
        model.month = entity.month
        model.year = entity.year
        model.updated_at = entity.updated_at
        model.archived_at = entity.archived_at
    
    def _model_to_budget(self, model: BudgetModel) -> BudgetEntity:
        """Convert ORM model to domain entity."""
        return BudgetEntity(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            amount=CurrencyVO(model.amount, Currency(model.currency)),
            category=BudgetCategory(model.category),
            color=model.color,
            icon=model.icon,
            month=model.month,
            year=model.year,
            archived_at=model.archived_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
