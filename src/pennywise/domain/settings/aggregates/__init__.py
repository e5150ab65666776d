from pennywise.domain.settings.aggregates.user_settings import UserSettings

__all__ = ["UserSettings"]
