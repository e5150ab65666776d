"""Delete a budget category together with its expenses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from pennywise.domain.budgeting import (
    CategoryNotFoundError,
    CategoryRepository,
    ExpenseRepository,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteCategoryCommand:
    """Remove a category after explicitly deleting the expenses filed under it.

    The cleanup happens here rather than through a database cascade, so the
    number of removed expenses can be reported back to the caller.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        expense_repository: ExpenseRepository,
    ):
        self._category_repo = category_repository
        self._expense_repo = expense_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(
            category_repository=factory.category_repository(),
            expense_repository=factory.expense_repository(),
        )

    async def execute(self, category_id: UUID) -> int:
        """Delete the category; return how many expenses were removed with it."""
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        deleted_expenses = await self._expense_repo.delete_by_category(category_id)
        await self._category_repo.delete(category_id)

        logger.info(
            "Category deleted: %s (ID: %s, %d expenses removed)",
            category.name,
            category_id,
            deleted_expenses,
        )
        return deleted_expenses
