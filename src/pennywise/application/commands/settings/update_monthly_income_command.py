"""Update the user's monthly income."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pennywise.domain.settings import UserSettings, UserSettingsRepository

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateMonthlyIncomeCommand:
    """Set monthly income (and optionally currency) for the current user."""

    def __init__(self, settings_repo: UserSettingsRepository):
        self._settings_repo = settings_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateMonthlyIncomeCommand:
        return cls(settings_repo=factory.user_settings_repository())

    async def execute(
        self,
        monthly_income: Decimal | int | str,
        currency: Optional[str] = None,
    ) -> UserSettings:
        settings = await self._settings_repo.get_or_default()
        settings.set_monthly_income(monthly_income)
        if currency is not None:
            settings.set_currency(currency)

        await self._settings_repo.save(settings)
        logger.info("Monthly income updated for user %s", settings.user_id)
        return settings
