"""Budgeting DTOs for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

if TYPE_CHECKING:
    from pennywise.domain.budgeting import Category, Expense
    from pennywise.domain.budgeting.value_objects import CategoryMetadata


@dataclass(frozen=True)
class CategoryDTO:
    """Budget category as shown to the user."""

    id: UUID
    name: str
    color: str
    budget_amount: Decimal
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> CategoryDTO:
        return cls(
            id=category.id,
            name=category.name,
            color=category.color,
            budget_amount=category.budget_amount,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


@dataclass(frozen=True)
class ExpenseDTO:
    """Expense with the display data of its category."""

    id: UUID
    amount: Decimal
    description: Optional[str]
    category_id: UUID
    category_name: Optional[str]
    category_color: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(
        cls,
        expense: Expense,
        category: Optional[CategoryMetadata] = None,
    ) -> ExpenseDTO:
        return cls(
            id=expense.id,
            amount=expense.amount,
            description=expense.description,
            category_id=expense.category_id,
            category_name=category.name if category else None,
            category_color=category.color if category else None,
            created_at=expense.created_at,
        )


@dataclass(frozen=True)
class CategoryBudgetStatusDTO:
    """Spending of one category against its monthly budget."""

    category_id: UUID
    name: str
    color: str
    budget_amount: Decimal
    spent: Decimal
    remaining: Decimal
    percentage_used: Decimal  # 0-100+ scale
    transaction_count: int

    @property
    def is_over_budget(self) -> bool:
        return self.percentage_used > Decimal("100")


@dataclass(frozen=True)
class BudgetOverviewDTO:
    """Dashboard summary for one month."""

    month: str  # YYYY-MM
    monthly_income: Decimal
    currency: str
    income_set: bool
    categories: list[CategoryBudgetStatusDTO]
    total_budget: Decimal
    total_spent: Decimal
    remaining_budget: Decimal  # income minus allocated budget
