"""Create the initial set of categories during onboarding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Sequence

from pennywise.domain.budgeting import (
    Category,
    CategoryRepository,
    DuplicateCategoryError,
)
from pennywise.domain.budgeting.value_objects import (
    custom_color,
    find_preset,
    parse_amount,
)
from pennywise.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory
    from pennywise.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategorySetupItem:
    """One category picked (or typed) by the user during setup."""

    name: str
    budget_amount: Decimal | int | str
    color: Optional[str] = None


class SetupCategoriesCommand:
    """Create several categories at once.

    Preset names get their preset color, custom names cycle through the
    custom palette unless an explicit color is given. Every budget must be
    greater than zero and names must be unique (case-insensitive) within the
    request and against the user's existing categories.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        current_user: CurrentUser,
    ):
        self._category_repo = category_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SetupCategoriesCommand:
        return cls(
            category_repository=factory.category_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, items: Sequence[CategorySetupItem]) -> list[Category]:
        if not items:
            msg = "Select at least one category"
            raise ValidationError(msg)

        existing = {
            category.name.casefold()
            for category in await self._category_repo.find_all()
        }
        categories = self._build_categories(items, existing)
        for category in categories:
            await self._category_repo.save(category)

        logger.info(
            "Set up %d categories for user %s",
            len(categories),
            self._user_id,
        )
        return categories

    def _build_categories(
        self,
        items: Sequence[CategorySetupItem],
        existing_names: set[str],
    ) -> list[Category]:
        seen = set(existing_names)
        custom_index = 0
        categories: list[Category] = []

        for item in items:
            key = item.name.strip().casefold()
            if key in seen:
                raise DuplicateCategoryError(item.name.strip())
            seen.add(key)

            budget = parse_amount(item.budget_amount, field_name="budget_amount")

            color = item.color
            if color is None:
                preset = find_preset(item.name)
                if preset is not None:
                    color = preset.color
                else:
                    color = custom_color(custom_index)
                    custom_index += 1

            categories.append(
                Category(
                    name=item.name,
                    user_id=self._user_id,
                    color=color,
                    budget_amount=budget,
                ),
            )
        return categories
