"""Pydantic schemas for analytics endpoints.

These schemas define the API response structure for chart data,
optimized for frontend visualization libraries.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class MonthlySummaryRowResponse(BaseModel):
    """Total spent in one category during one month."""

    user_id: UUID
    category_id: UUID
    category_name: str
    category_color: str
    month: date = Field(description="First day of the month (UTC)")
    total_spent: Decimal
    transaction_count: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "11111111-1111-1111-1111-111111111111",
                "category_id": "7f7c2f0c-2f7e-4d55-9f3c-0b8c8f1d2a11",
                "category_name": "Groceries",
                "category_color": "#10b981",
                "month": "2024-01-01",
                "total_spent": "80.00",
                "transaction_count": 2,
            },
        },
    )


class MonthlySummaryResponse(BaseModel):
    """Monthly summary rows, sorted chronologically then by category name."""

    rows: list[MonthlySummaryRowResponse]
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_spent: Decimal
    transaction_count: int


class SpendingPeriodResponse(BaseModel):
    """Category breakdown for a single month.

    Used for stacked bar charts where each category is a separate series.
    """

    period: str = Field(description="Period identifier in YYYY-MM format")
    period_label: str = Field(description="Human-readable label (e.g., 'Jan 2024')")
    categories: dict[str, Decimal] = Field(
        description="Amount per category (category name -> amount)",
    )
    total: Decimal = Field(description="Sum of all categories for this period")


class CategorySpendingResponse(BaseModel):
    """One slice of the spending breakdown (pie chart)."""

    category_id: str
    name: str
    color: str
    value: Decimal
    percentage: Decimal = Field(description="Share of total spending (0-100)")
    transaction_count: int


class SpendingAnalyticsResponse(BaseModel):
    """Chart-ready spending analytics for a time range."""

    time_range: str
    start_date: date
    end_date: date
    periods: list[SpendingPeriodResponse] = Field(
        description="Chronologically ordered monthly series",
    )
    breakdown: list[CategorySpendingResponse] = Field(
        description="Spending per category, largest first",
    )
    category_colors: dict[str, str] = Field(
        description="Category name -> display color, for chart legends",
    )
    total_spent: Decimal
    average_monthly_spending: Decimal = Field(
        description="Total spent divided by the number of months with spending",
    )
    transaction_count: int
