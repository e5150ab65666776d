"""Record a new expense."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pennywise.application.dtos.budgeting import ExpenseDTO
from pennywise.domain.budgeting import (
    CategoryNotFoundError,
    CategoryRepository,
    Expense,
    ExpenseRepository,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory
    from pennywise.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CreateExpenseCommand:
    """Record an expense against one of the current user's categories."""

    def __init__(
        self,
        expense_repository: ExpenseRepository,
        category_repository: CategoryRepository,
        current_user: CurrentUser,
    ):
        self._expense_repo = expense_repository
        self._category_repo = category_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateExpenseCommand:
        return cls(
            expense_repository=factory.expense_repository(),
            category_repository=factory.category_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        amount: Decimal | int | str,
        category_id: UUID,
        description: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> ExpenseDTO:
        # Repository is user-scoped: another user's category is "not found"
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        expense = Expense(
            amount=amount,
            category_id=category.id,
            user_id=self._user_id,
            description=description,
            created_at=created_at,
        )
        await self._expense_repo.save(expense)

        logger.info(
            "Expense recorded: %s in category %s (ID: %s)",
            expense.amount,
            category.name,
            expense.id,
        )
        return ExpenseDTO.from_entity(expense, category.metadata())
