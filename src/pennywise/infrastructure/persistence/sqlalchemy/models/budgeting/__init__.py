from pennywise.infrastructure.persistence.sqlalchemy.models.budgeting.category_model import (  # NOQA: E501
    BudgetCategoryModel,
)
from pennywise.infrastructure.persistence.sqlalchemy.models.budgeting.expense_model import (  # NOQA: E501
    ExpenseModel,
)

__all__ = ["BudgetCategoryModel", "ExpenseModel"]
