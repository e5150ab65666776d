"""Edit an existing expense."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pennywise.application.dtos.budgeting import ExpenseDTO
from pennywise.domain.budgeting import (
    CategoryNotFoundError,
    CategoryRepository,
    ExpenseNotFoundError,
    ExpenseRepository,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

_UNSET = object()


class UpdateExpenseCommand:
    """Change amount, description or category of an expense."""

    def __init__(
        self,
        expense_repository: ExpenseRepository,
        category_repository: CategoryRepository,
    ):
        self._expense_repo = expense_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateExpenseCommand:
        return cls(
            expense_repository=factory.expense_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(
        self,
        expense_id: UUID,
        amount: Optional[Decimal] = None,
        category_id: Optional[UUID] = None,
        description: Optional[str] | object = _UNSET,
    ) -> ExpenseDTO:
        """Apply the given changes.

        ``description=None`` clears the description; leaving it out keeps it.
        """
        expense = await self._expense_repo.find_by_id(expense_id)
        if expense is None:
            raise ExpenseNotFoundError(expense_id)

        target_category_id = category_id or expense.category_id
        category = await self._category_repo.find_by_id(target_category_id)
        if category is None:
            raise CategoryNotFoundError(target_category_id)

        if amount is not None:
            expense.change_amount(amount)
        if category_id is not None:
            expense.move_to_category(category.id)
        if description is not _UNSET:
            expense.change_description(description)  # type: ignore[arg-type]

        await self._expense_repo.save(expense)
        logger.info("Expense updated: %s", expense.id)
        return ExpenseDTO.from_entity(expense, category.metadata())
