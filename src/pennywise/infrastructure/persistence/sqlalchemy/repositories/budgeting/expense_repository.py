"""SQLAlchemy implementation of ExpenseRepository."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.budgeting.entities import Expense
from pennywise.domain.budgeting.repositories import ExpenseRepository
from pennywise.domain.shared.time import ensure_tz_aware, to_utc
from pennywise.infrastructure.persistence.sqlalchemy.models import ExpenseModel

if TYPE_CHECKING:
    from pennywise.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class ExpenseRepositorySQLAlchemy(ExpenseRepository):
    """SQLAlchemy implementation of the user-scoped expense repository."""

    def __init__(self, session: AsyncSession, current_user: CurrentUser):
        self._session = session
        self._user_id = current_user.user_id

    async def save(self, expense: Expense) -> None:
        model = await self._find_model_by_id(expense.id)

        if model:
            logger.debug("Updating existing expense: %s", expense.id)
            model.amount = expense.amount
            model.description = expense.description
            model.category_id = expense.category_id
        else:
            logger.debug("Creating new expense: %s", expense.id)
            self._session.add(
                ExpenseModel(
                    id=expense.id,
                    user_id=self._user_id,
                    category_id=expense.category_id,
                    amount=expense.amount,
                    description=expense.description,
                    created_at=to_utc(expense.created_at),
                ),
            )

        await self._session.flush()

    async def find_by_id(self, expense_id: UUID) -> Optional[Expense]:
        model = await self._find_model_by_id(expense_id)

        if not model:
            return None

        return self._map_to_domain(model)

    async def find_all(
        self,
        category_id: Optional[UUID] = None,
        start: Optional[datetime] = None,
        end_exclusive: Optional[datetime] = None,
    ) -> List[Expense]:
        stmt = select(ExpenseModel).where(ExpenseModel.user_id == self._user_id)
        if category_id is not None:
            stmt = stmt.where(ExpenseModel.category_id == category_id)
        if start is not None:
            stmt = stmt.where(ExpenseModel.created_at >= to_utc(start))
        if end_exclusive is not None:
            stmt = stmt.where(ExpenseModel.created_at < to_utc(end_exclusive))
        stmt = stmt.order_by(ExpenseModel.created_at.desc(), ExpenseModel.id)

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete(self, expense_id: UUID) -> bool:
        stmt = delete(ExpenseModel).where(
            ExpenseModel.id == expense_id,
            ExpenseModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0

    async def delete_by_category(self, category_id: UUID) -> int:
        stmt = delete(ExpenseModel).where(
            ExpenseModel.category_id == category_id,
            ExpenseModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        logger.debug(
            "Deleted %d expenses of category %s",
            result.rowcount,
            category_id,
        )
        return result.rowcount

    async def _find_model_by_id(self, expense_id: UUID) -> Optional[ExpenseModel]:
        stmt = select(ExpenseModel).where(
            ExpenseModel.id == expense_id,
            ExpenseModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _map_to_domain(model: ExpenseModel) -> Expense:
        return Expense.reconstitute(
            id=model.id,
            user_id=model.user_id,
            category_id=model.category_id,
            amount=model.amount,
            description=model.description,
            created_at=ensure_tz_aware(model.created_at),
        )
