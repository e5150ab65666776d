"""Budgeting value objects."""

from pennywise.domain.budgeting.value_objects.amount import (
    MAX_AMOUNT,
    ZERO,
    parse_amount,
)
from pennywise.domain.budgeting.value_objects.category_color import (
    CUSTOM_CATEGORY_COLORS,
    DEFAULT_CATEGORY_COLOR,
    PRESET_CATEGORIES,
    CategoryPreset,
    custom_color,
    find_preset,
    normalize_color,
)
from pennywise.domain.budgeting.value_objects.category_metadata import (
    CategoryMetadata,
)
from pennywise.domain.budgeting.value_objects.expense_record import ExpenseRecord
from pennywise.domain.budgeting.value_objects.monthly_summary_row import (
    MonthlySummaryRow,
)

__all__ = [
    "CUSTOM_CATEGORY_COLORS",
    "DEFAULT_CATEGORY_COLOR",
    "MAX_AMOUNT",
    "PRESET_CATEGORIES",
    "ZERO",
    "CategoryMetadata",
    "CategoryPreset",
    "ExpenseRecord",
    "MonthlySummaryRow",
    "custom_color",
    "find_preset",
    "normalize_color",
    "parse_amount",
]
