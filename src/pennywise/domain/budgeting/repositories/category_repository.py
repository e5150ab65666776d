"""Category repository interface.

Defines the contract for Category persistence. Implementations are
user-scoped via CurrentUser, meaning all queries automatically
filter by the current user's user_id.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from pennywise.domain.budgeting.entities import Category


class CategoryRepository(ABC):
    """
    Repository interface for Category entities.

    Note: Implementations are scoped to a specific user.
    Callers don't need to pass user_id explicitly.
    """

    @abstractmethod
    async def save(self, category: Category) -> None:
        """Insert or update a category for the current user."""

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find category by ID."""

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """Find all categories, newest first."""

    @abstractmethod
    async def delete(self, category_id: UUID) -> bool:
        """Delete a category. Returns True if a row was removed."""
