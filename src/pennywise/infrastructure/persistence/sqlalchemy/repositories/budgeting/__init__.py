from pennywise.infrastructure.persistence.sqlalchemy.repositories.budgeting.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.budgeting.expense_repository import (  # NOQA: E501
    ExpenseRepositorySQLAlchemy,
)

__all__ = ["CategoryRepositorySQLAlchemy", "ExpenseRepositorySQLAlchemy"]
