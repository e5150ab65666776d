from pennywise.infrastructure.persistence.sqlalchemy.repositories.settings.user_settings_repository import (  # NOQA: E501
    UserSettingsRepositorySQLAlchemy,
)

__all__ = ["UserSettingsRepositorySQLAlchemy"]
