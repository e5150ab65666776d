"""Budgeting entities."""

from pennywise.domain.budgeting.entities.category import Category
from pennywise.domain.budgeting.entities.expense import Expense

__all__ = ["Category", "Expense"]
