from pennywise.infrastructure.persistence.sqlalchemy.models.profile.profile_model import (  # NOQA: E501
    ProfileModel,
)

__all__ = ["ProfileModel"]
