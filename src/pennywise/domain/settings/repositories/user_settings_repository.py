"""Abstract repository for user settings."""

from abc import ABC, abstractmethod

from pennywise.domain.settings.aggregates import UserSettings


class UserSettingsRepository(ABC):
    """Repository interface for UserSettings aggregate.

    This repository is user-scoped - all operations automatically apply to
    the current user without needing to pass user_id explicitly.
    """

    @abstractmethod
    async def get_or_default(self) -> UserSettings:
        """Get user settings, or unsaved defaults if none are stored."""

    @abstractmethod
    async def find(self) -> UserSettings | None:
        """Find settings for current user, returns None if not exists."""

    @abstractmethod
    async def save(self, settings: UserSettings) -> None:
        """Insert or update user settings."""
