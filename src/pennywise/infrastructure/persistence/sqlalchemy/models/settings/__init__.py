from pennywise.infrastructure.persistence.sqlalchemy.models.settings.user_settings_model import (  # NOQA: E501
    UserSettingsModel,
)

__all__ = ["UserSettingsModel"]
