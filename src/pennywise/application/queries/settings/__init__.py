from pennywise.application.queries.settings.get_user_settings_query import (
    GetUserSettingsQuery,
)

__all__ = ["GetUserSettingsQuery"]
