"""SQLAlchemy implementation of the ExpenseStore read port.

Fetches expense rows joined with their category in one query. The category
is outer-joined so an expense whose category row is gone still comes back,
with ``category=None``; the aggregator turns that into a
MissingCategoryMetadataError instead of silently dropping the amount.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.budgeting.entities import Expense
from pennywise.domain.budgeting.value_objects import CategoryMetadata, ExpenseRecord
from pennywise.domain.shared.exceptions import UnauthenticatedError
from pennywise.domain.shared.time import (
    end_of_day_utc_exclusive,
    ensure_tz_aware,
    start_of_day_utc,
)
from pennywise.infrastructure.persistence.sqlalchemy.models import (
    BudgetCategoryModel,
    ExpenseModel,
)

if TYPE_CHECKING:
    from pennywise.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class SqlAlchemyExpenseStore:
    """Read-only expense store; the user is passed on every call."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def fetch_expenses(
        self,
        user: Optional[CurrentUser],
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[ExpenseRecord]:
        if user is None:
            raise UnauthenticatedError("read expenses")

        stmt = (
            select(ExpenseModel, BudgetCategoryModel)
            .outerjoin(
                BudgetCategoryModel,
                and_(
                    BudgetCategoryModel.id == ExpenseModel.category_id,
                    BudgetCategoryModel.user_id == ExpenseModel.user_id,
                ),
            )
            .where(ExpenseModel.user_id == user.user_id)
        )
        # Inclusive calendar dates -> half-open UTC timestamp window
        if start_date is not None:
            stmt = stmt.where(ExpenseModel.created_at >= start_of_day_utc(start_date))
        if end_date is not None:
            end_exclusive = end_of_day_utc_exclusive(end_date)
            if end_exclusive is not None:
                stmt = stmt.where(ExpenseModel.created_at < end_exclusive)
        stmt = stmt.order_by(ExpenseModel.created_at.desc(), ExpenseModel.id)

        result = await self._session.execute(stmt)
        records = [
            ExpenseRecord(
                expense=self._map_expense(expense_model),
                category=self._map_category(category_model),
            )
            for expense_model, category_model in result.all()
        ]
        logger.debug(
            "Fetched %d expenses for user %s (%s..%s)",
            len(records),
            user.user_id,
            start_date,
            end_date,
        )
        return records

    @staticmethod
    def _map_expense(model: ExpenseModel) -> Expense:
        return Expense.reconstitute(
            id=model.id,
            user_id=model.user_id,
            category_id=model.category_id,
            amount=model.amount,
            description=model.description,
            created_at=ensure_tz_aware(model.created_at),
        )

    @staticmethod
    def _map_category(
        model: Optional[BudgetCategoryModel],
    ) -> Optional[CategoryMetadata]:
        if model is None:
            return None
        return CategoryMetadata(
            category_id=model.id,
            name=model.name,
            color=model.color,
        )
