"""SQLAlchemy implementation of CategoryRepository.

This implementation is user-scoped via CurrentUser, meaning all queries
automatically filter by the current user's user_id.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.budgeting.entities import Category
from pennywise.domain.budgeting.repositories import CategoryRepository
from pennywise.domain.shared.time import ensure_tz_aware
from pennywise.infrastructure.persistence.sqlalchemy.models import (
    BudgetCategoryModel,
)

if TYPE_CHECKING:
    from pennywise.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """SQLAlchemy implementation of budget category repository."""

    def __init__(self, session: AsyncSession, current_user: CurrentUser):
        self._session = session
        self._user_id = current_user.user_id

    async def save(self, category: Category) -> None:
        model = await self._find_model_by_id(category.id)

        if model:
            logger.debug("Updating existing category: %s", category.name)
            self._update_model_from_domain(model, category)
        else:
            logger.debug("Creating new category: %s", category.name)
            self._session.add(self._create_model_from_domain(category))

        await self._session.flush()

    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        model = await self._find_model_by_id(category_id)

        if not model:
            return None

        return self._map_to_domain(model)

    async def find_all(self) -> List[Category]:
        stmt = (
            select(BudgetCategoryModel)
            .where(BudgetCategoryModel.user_id == self._user_id)
            .order_by(BudgetCategoryModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete(self, category_id: UUID) -> bool:
        stmt = delete(BudgetCategoryModel).where(
            BudgetCategoryModel.id == category_id,
            BudgetCategoryModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0

    async def _find_model_by_id(
        self,
        category_id: UUID,
    ) -> Optional[BudgetCategoryModel]:
        stmt = select(BudgetCategoryModel).where(
            BudgetCategoryModel.id == category_id,
            BudgetCategoryModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _create_model_from_domain(self, category: Category) -> BudgetCategoryModel:
        return BudgetCategoryModel(
            id=category.id,
            user_id=self._user_id,
            name=category.name,
            color=category.color,
            budget_amount=category.budget_amount,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

    def _update_model_from_domain(
        self,
        model: BudgetCategoryModel,
        category: Category,
    ) -> None:
        model.name = category.name
        model.color = category.color
        model.budget_amount = category.budget_amount
        model.updated_at = category.updated_at

    def _map_to_domain(self, model: BudgetCategoryModel) -> Category:
        return Category.reconstitute(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            color=model.color,
            budget_amount=model.budget_amount,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
