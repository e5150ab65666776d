"""Budgeting commands - operations on categories and expenses."""

from pennywise.application.commands.budgeting.create_category_command import (
    CreateCategoryCommand,
)
from pennywise.application.commands.budgeting.create_expense_command import (
    CreateExpenseCommand,
)
from pennywise.application.commands.budgeting.delete_category_command import (
    DeleteCategoryCommand,
)
from pennywise.application.commands.budgeting.delete_expense_command import (
    DeleteExpenseCommand,
)
from pennywise.application.commands.budgeting.setup_categories_command import (
    CategorySetupItem,
    SetupCategoriesCommand,
)
from pennywise.application.commands.budgeting.update_category_command import (
    UpdateCategoryCommand,
)
from pennywise.application.commands.budgeting.update_expense_command import (
    UpdateExpenseCommand,
)

__all__ = [
    # Category commands
    "CategorySetupItem",
    "CreateCategoryCommand",
    "DeleteCategoryCommand",
    "SetupCategoriesCommand",
    "UpdateCategoryCommand",
    # Expense commands
    "CreateExpenseCommand",
    "DeleteExpenseCommand",
    "UpdateExpenseCommand",
]
