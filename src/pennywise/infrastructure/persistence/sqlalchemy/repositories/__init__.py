"""SQLAlchemy repository implementations."""

from pennywise.infrastructure.persistence.sqlalchemy.repositories.budgeting import (
    CategoryRepositorySQLAlchemy,
    ExpenseRepositorySQLAlchemy,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.profile import (
    ProfileRepositorySQLAlchemy,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.settings import (
    UserSettingsRepositorySQLAlchemy,
)

__all__ = [
    "CategoryRepositorySQLAlchemy",
    "ExpenseRepositorySQLAlchemy",
    "ProfileRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserSettingsRepositorySQLAlchemy",
]
