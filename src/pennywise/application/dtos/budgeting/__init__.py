"""Budgeting DTOs."""

from pennywise.application.dtos.budgeting.budgeting_dto import (
    BudgetOverviewDTO,
    CategoryBudgetStatusDTO,
    CategoryDTO,
    ExpenseDTO,
)

__all__ = [
    "BudgetOverviewDTO",
    "CategoryBudgetStatusDTO",
    "CategoryDTO",
    "ExpenseDTO",
]
