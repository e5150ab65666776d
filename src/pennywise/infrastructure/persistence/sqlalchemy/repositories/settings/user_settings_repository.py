"""SQLAlchemy implementation of UserSettingsRepository."""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.settings import UserSettings, UserSettingsRepository
from pennywise.infrastructure.persistence.sqlalchemy.models.settings import (
    UserSettingsModel,
)

if TYPE_CHECKING:
    from pennywise.application.ports.identity import CurrentUser


class UserSettingsRepositorySQLAlchemy(UserSettingsRepository):
    """SQLAlchemy implementation of UserSettingsRepository.

    This repository is user-scoped - all operations automatically apply to
    the current user passed at construction time.
    """

    def __init__(
        self,
        session: AsyncSession,
        current_user: "CurrentUser",
        default_currency: str = "USD",
    ) -> None:
        self._session = session
        self._current_user = current_user
        self._default_currency = default_currency

    async def get_or_default(self) -> UserSettings:
        """Get user settings; unsaved defaults if nothing is stored yet."""
        settings = await self.find()
        if settings is not None:
            return settings
        return UserSettings.default(
            self._current_user.user_id,
            currency=self._default_currency,
        )

    async def find(self) -> UserSettings | None:
        """Find settings for current user, returns None if not exists."""
        model = await self._find_model(self._current_user.user_id)
        if model is None:
            return None

        return UserSettings(
            user_id=model.user_id,
            monthly_income=model.monthly_income,
            currency=model.currency,
        )

    async def save(self, settings: UserSettings) -> None:
        """Save user settings."""
        existing = await self._find_model(settings.user_id)

        if existing is not None:
            existing.monthly_income = settings.monthly_income
            existing.currency = settings.currency
        else:
            self._session.add(
                UserSettingsModel(
                    user_id=settings.user_id,
                    monthly_income=settings.monthly_income,
                    currency=settings.currency,
                ),
            )

        await self._session.flush()

    async def _find_model(self, user_id: UUID) -> UserSettingsModel | None:
        stmt = select(UserSettingsModel).where(UserSettingsModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
