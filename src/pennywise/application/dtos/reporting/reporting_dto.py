"""Reporting DTOs for visualization.

These DTOs provide data structures optimized for frontend chart rendering:
a chronological monthly series for line/bar charts and a per-category
breakdown for pie charts.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from pennywise.domain.budgeting.value_objects import MonthlySummaryRow


@dataclass
class MonthlySummaryResult:
    """Raw monthly summary rows for a date window, sorted chronologically."""

    rows: list[MonthlySummaryRow]
    start_date: Optional[date]
    end_date: Optional[date]
    total_spent: Decimal
    transaction_count: int


@dataclass
class SpendingPeriod:
    """Spending in one month, split by category name."""

    period: str  # YYYY-MM, sortable
    period_label: str  # "Jan 2024"
    categories: dict[str, Decimal]
    total: Decimal


@dataclass
class CategorySpending:
    """One slice of the spending breakdown (pie chart)."""

    category_id: str
    name: str
    color: str
    value: Decimal
    percentage: Decimal  # 0-100 scale
    transaction_count: int


@dataclass
class SpendingAnalyticsResult:
    """Chart-ready spending analytics for a time range."""

    time_range: str
    start_date: date
    end_date: date
    periods: list[SpendingPeriod]
    breakdown: list[CategorySpending]
    category_colors: dict[str, str] = field(default_factory=dict)
    total_spent: Decimal = Decimal("0")
    average_monthly_spending: Decimal = Decimal("0")
    transaction_count: int = 0
