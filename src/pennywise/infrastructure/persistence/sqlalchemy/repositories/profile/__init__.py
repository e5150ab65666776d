from pennywise.infrastructure.persistence.sqlalchemy.repositories.profile.profile_repository import (  # NOQA: E501
    ProfileRepositorySQLAlchemy,
)

__all__ = ["ProfileRepositorySQLAlchemy"]
