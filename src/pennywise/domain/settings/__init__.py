"""Settings domain: per-user budgeting preferences."""

from pennywise.domain.settings.aggregates import UserSettings
from pennywise.domain.settings.repositories import UserSettingsRepository

__all__ = ["UserSettings", "UserSettingsRepository"]
