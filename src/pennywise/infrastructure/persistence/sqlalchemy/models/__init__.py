"""SQLAlchemy models for persistence layer."""

from pennywise.infrastructure.persistence.sqlalchemy.models.base import Base
from pennywise.infrastructure.persistence.sqlalchemy.models.budgeting import (
    BudgetCategoryModel,
    ExpenseModel,
)
from pennywise.infrastructure.persistence.sqlalchemy.models.profile import (
    ProfileModel,
)
from pennywise.infrastructure.persistence.sqlalchemy.models.settings import (
    UserSettingsModel,
)

__all__ = [
    "Base",
    "BudgetCategoryModel",
    "ExpenseModel",
    "ProfileModel",
    "UserSettingsModel",
]
