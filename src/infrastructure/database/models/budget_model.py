"""Budget and transaction SQLAlchemy models."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4
from sqlalchemy import String, Integer, Numeric, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class BudgetModel(Base):
    """SQLAlchemy model for budgets."""
    
    __tablename__ = "budgets"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4
    )
    
    # Owner
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    
    # Budget data
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(10), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    color: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    icon: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    
    # Soft delete
    archived_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True
    )
    
    def __repr__(self) -> str:
        return f"<BudgetModel(id={self.id}, name={self.name})>"


class TransactionModel(Base):
    """SQLAlchemy model for transactions (income, spending, transfers)."""
    
    __tablename__ = "transactions"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4
    )
    
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    
    # Transaction data
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(10), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    recurring: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    name: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    description: Mapped[str] = mapped_column(String(1000), default="", nullable=False)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True
    )
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    
    def __repr__(self) -> str:
        return f"<TransactionModel(id={self.id}, type={self.type})>"


class BudgetTransactionModel(Base):
    """Junction rows linking spending transactions to their budget."""
    
    __tablename__ = "budget_transactions"
    
    budget_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("budgets.id", ondelete="CASCADE"),
        primary_key=True
    )
    transaction_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("transactions.id", ondelete="CASCADE"),
        primary_key=True,
        index=True
    )
    
    def __repr__(self) -> str:
        return f"<BudgetTransactionModel(budget_id={self.budget_id}, transaction_id={self.transaction_id})>"
