"""SQLAlchemy model for expenses."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pennywise.infrastructure.persistence.sqlalchemy.models.base import Base


class ExpenseModel(Base):
    """Database model for expenses.

    ``category_id`` has no ON DELETE CASCADE: deleting a category removes
    its expenses in the application layer first.
    """

    __tablename__ = "expenses"

    __table_args__ = (
        # Composite index for the user-scoped, date-windowed reads
        Index("ix_expenses_user_created_at", "user_id", "created_at"),
        Index("ix_expenses_category_id", "category_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    category_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("budget_categories.id"),
        nullable=False,
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Always UTC
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<ExpenseModel(id={self.id}, amount={self.amount}, "
            f"category_id={self.category_id})>"
        )
