"""Delete an expense."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from pennywise.domain.budgeting import ExpenseNotFoundError, ExpenseRepository

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteExpenseCommand:
    def __init__(self, expense_repository: ExpenseRepository):
        self._expense_repo = expense_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteExpenseCommand:
        return cls(expense_repository=factory.expense_repository())

    async def execute(self, expense_id: UUID) -> None:
        deleted = await self._expense_repo.delete(expense_id)
        if not deleted:
            raise ExpenseNotFoundError(expense_id)
        logger.info("Expense deleted: %s", expense_id)
