"""List expenses with their category."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pennywise.application.dtos.budgeting import ExpenseDTO
from pennywise.domain.budgeting import CategoryRepository, ExpenseRepository
from pennywise.domain.shared.exceptions import ErrorCode, ValidationError
from pennywise.domain.shared.time import (
    end_of_day_utc_exclusive,
    last_day_of_month,
    parse_month_key,
    start_of_day_utc,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


def parse_month(month: str) -> date:
    """Parse a ``YYYY-MM`` query value, raising ValidationError if malformed."""
    try:
        first = parse_month_key(month)
    except ValueError as e:
        msg = f"Invalid month '{month}': expected YYYY-MM"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_DATE,
            details={"month": month},
        ) from e
    return first


class ListExpensesQuery:
    """Return expenses newest first, optionally filtered by category and month."""

    def __init__(
        self,
        expense_repository: ExpenseRepository,
        category_repository: CategoryRepository,
    ):
        self._expense_repo = expense_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListExpensesQuery:
        return cls(
            expense_repository=factory.expense_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(
        self,
        category_id: Optional[UUID] = None,
        month: Optional[str] = None,
    ) -> list[ExpenseDTO]:
        start = end_exclusive = None
        if month:
            first = parse_month(month)
            start = start_of_day_utc(first)
            end_exclusive = end_of_day_utc_exclusive(last_day_of_month(first))

        expenses = await self._expense_repo.find_all(
            category_id=category_id,
            start=start,
            end_exclusive=end_exclusive,
        )
        categories = {
            category.id: category.metadata()
            for category in await self._category_repo.find_all()
        }
        logger.debug("Listed %d expenses", len(expenses))
        return [
            ExpenseDTO.from_entity(expense, categories.get(expense.category_id))
            for expense in expenses
        ]
