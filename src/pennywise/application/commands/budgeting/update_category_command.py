"""Update an existing budget category."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pennywise.application.commands.budgeting.create_category_command import (
    ensure_category_name_available,
)
from pennywise.domain.budgeting import (
    Category,
    CategoryNotFoundError,
    CategoryRepository,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateCategoryCommand:
    """Apply a partial update (name, color, budget) to a category."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        category_id: UUID,
        name: Optional[str] = None,
        color: Optional[str] = None,
        budget_amount: Optional[Decimal] = None,
    ) -> Category:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        if name is not None:
            category.rename(name)
            await ensure_category_name_available(
                self._category_repo,
                category.name,
                exclude_id=category.id,
            )
        if color is not None:
            category.recolor(color)
        if budget_amount is not None:
            category.change_budget(budget_amount)

        await self._category_repo.save(category)
        logger.info("Category updated: %s (ID: %s)", category.name, category.id)
        return category
