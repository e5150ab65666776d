"""Budgeting repository interfaces."""

from pennywise.domain.budgeting.repositories.category_repository import (
    CategoryRepository,
)
from pennywise.domain.budgeting.repositories.expense_repository import (
    ExpenseRepository,
)

__all__ = ["CategoryRepository", "ExpenseRepository"]
