"""List budget categories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pennywise.application.dtos.budgeting import CategoryDTO
from pennywise.domain.budgeting import CategoryRepository

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class ListCategoriesQuery:
    """Return the current user's categories, newest first."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> list[CategoryDTO]:
        categories = await self._category_repo.find_all()
        return [CategoryDTO.from_entity(category) for category in categories]
