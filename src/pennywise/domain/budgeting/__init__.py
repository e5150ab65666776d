"""Budgeting domain: categories, expenses and monthly spending summaries."""

from pennywise.domain.budgeting.entities import Category, Expense
from pennywise.domain.budgeting.exceptions import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    ExpenseNotFoundError,
    InvalidAmountError,
    InvalidCategoryNameError,
    InvalidColorError,
    MissingCategoryMetadataError,
)
from pennywise.domain.budgeting.repositories import (
    CategoryRepository,
    ExpenseRepository,
)
from pennywise.domain.budgeting.services import MonthlySummaryAggregator
from pennywise.domain.budgeting.value_objects import (
    CategoryMetadata,
    ExpenseRecord,
    MonthlySummaryRow,
)

__all__ = [
    # Entities
    "Category",
    "Expense",
    # Value objects
    "CategoryMetadata",
    "ExpenseRecord",
    "MonthlySummaryRow",
    # Repositories
    "CategoryRepository",
    "ExpenseRepository",
    # Services
    "MonthlySummaryAggregator",
    # Exceptions
    "CategoryNotFoundError",
    "DuplicateCategoryError",
    "ExpenseNotFoundError",
    "InvalidAmountError",
    "InvalidCategoryNameError",
    "InvalidColorError",
    "MissingCategoryMetadataError",
]
