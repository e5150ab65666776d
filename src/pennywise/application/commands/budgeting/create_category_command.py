"""Create budget categories."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pennywise.domain.budgeting import (
    Category,
    CategoryRepository,
    DuplicateCategoryError,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory
    from pennywise.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


async def ensure_category_name_available(
    category_repository: CategoryRepository,
    name: str,
    *,
    exclude_id: Optional[UUID] = None,
) -> None:
    """Raise DuplicateCategoryError if the user already has ``name``.

    Names compare trimmed and case-insensitively. Reports and charts key
    spending by category name, so two categories may not share one.
    """
    key = name.strip().casefold()
    for existing in await category_repository.find_all():
        if existing.id != exclude_id and existing.name.casefold() == key:
            raise DuplicateCategoryError(name.strip())


class CreateCategoryCommand:
    """Validate and create a new category for the current user."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        current_user: CurrentUser,
    ):
        self._category_repo = category_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(
            category_repository=factory.category_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        name: str,
        color: Optional[str] = None,
        budget_amount: Decimal | int | str = Decimal("0"),
    ) -> Category:
        category = Category(
            name=name,
            user_id=self._user_id,
            color=color,
            budget_amount=budget_amount,
        )
        await ensure_category_name_available(self._category_repo, category.name)
        await self._category_repo.save(category)
        logger.info("Category created: %s (ID: %s)", category.name, category.id)
        return category
