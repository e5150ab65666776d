"""Expense repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pennywise.domain.budgeting.entities import Expense


class ExpenseRepository(ABC):
    """
    Repository interface for Expense entities.

    Note: Implementations are scoped to a specific user.
    All queries automatically filter by that user's id.
    """

    @abstractmethod
    async def save(self, expense: Expense) -> None:
        """Insert or update an expense for the current user."""

    @abstractmethod
    async def find_by_id(self, expense_id: UUID) -> Optional[Expense]:
        """Find expense by ID."""

    @abstractmethod
    async def find_all(
        self,
        category_id: Optional[UUID] = None,
        start: Optional[datetime] = None,
        end_exclusive: Optional[datetime] = None,
    ) -> List[Expense]:
        """Find expenses, newest first, optionally filtered."""

    @abstractmethod
    async def delete(self, expense_id: UUID) -> bool:
        """Delete an expense. Returns True if a row was removed."""

    @abstractmethod
    async def delete_by_category(self, category_id: UUID) -> int:
        """Delete every expense of a category. Returns the number removed."""
