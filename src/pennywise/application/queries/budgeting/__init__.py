"""Budgeting queries."""

from pennywise.application.queries.budgeting.budget_overview_query import (
    BudgetOverviewQuery,
)
from pennywise.application.queries.budgeting.list_categories_query import (
    ListCategoriesQuery,
)
from pennywise.application.queries.budgeting.list_expenses_query import (
    ListExpensesQuery,
)

__all__ = [
    "BudgetOverviewQuery",
    "ListCategoriesQuery",
    "ListExpensesQuery",
]
