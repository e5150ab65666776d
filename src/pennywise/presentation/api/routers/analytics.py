"""Analytics router for spending visualization endpoints.

Provides monthly summaries and chart-ready series built from the
expense store and the monthly summary aggregator.
"""

import logging
from datetime import date
from typing import Annotated, Literal

from fastapi import APIRouter, Query

from pennywise.application.queries.reporting import (
    DEFAULT_TIME_RANGE,
    MonthlySpendingSummaryQuery,
    SpendingAnalyticsQuery,
)
from pennywise.presentation.api.dependencies import RepoFactory
from pennywise.presentation.api.schemas.analytics import (
    CategorySpendingResponse,
    MonthlySummaryResponse,
    MonthlySummaryRowResponse,
    SpendingAnalyticsResponse,
    SpendingPeriodResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

StartDateParam = Annotated[
    date | None,
    Query(description="First day of the window (inclusive, UTC)"),
]
EndDateParam = Annotated[
    date | None,
    Query(description="Last day of the window (inclusive, UTC)"),
]
TimeRangeParam = Annotated[
    Literal["3months", "6months", "1year"],
    Query(description="How far back from today the window reaches"),
]


@router.get(
    "/monthly-summary",
    summary="Get monthly spending summary",
    responses={
        200: {"description": "One row per (month, category)"},
        503: {"description": "Data store unavailable"},
    },
)
async def get_monthly_summary(
    factory: RepoFactory,
    start_date: StartDateParam = None,
    end_date: EndDateParam = None,
) -> MonthlySummaryResponse:
    """
    Monthly totals per category, sorted chronologically.

    Months are calendar months in UTC.
    """
    query = MonthlySpendingSummaryQuery.from_factory(factory)
    result = await query.execute(start_date=start_date, end_date=end_date)

    return MonthlySummaryResponse(
        rows=[
            MonthlySummaryRowResponse(
                user_id=row.user_id,
                category_id=row.category_id,
                category_name=row.category_name,
                category_color=row.category_color,
                month=row.month,
                total_spent=row.total_spent,
                transaction_count=row.transaction_count,
            )
            for row in result.rows
        ],
        start_date=result.start_date,
        end_date=result.end_date,
        total_spent=result.total_spent,
        transaction_count=result.transaction_count,
    )


@router.get(
    "/spending",
    summary="Get spending analytics",
    responses={200: {"description": "Monthly series and category breakdown"}},
)
async def get_spending_analytics(
    factory: RepoFactory,
    time_range: TimeRangeParam = DEFAULT_TIME_RANGE,
) -> SpendingAnalyticsResponse:
    """
    Spending over the last 3, 6 or 12 months.

    **Chart types:**
    - Stacked bar chart (`periods`)
    - Pie/donut chart (`breakdown`)
    """
    query = SpendingAnalyticsQuery.from_factory(factory)
    result = await query.execute(time_range=time_range)

    return SpendingAnalyticsResponse(
        time_range=result.time_range,
        start_date=result.start_date,
        end_date=result.end_date,
        periods=[
            SpendingPeriodResponse(
                period=p.period,
                period_label=p.period_label,
                categories=p.categories,
                total=p.total,
            )
            for p in result.periods
        ],
        breakdown=[
            CategorySpendingResponse(
                category_id=item.category_id,
                name=item.name,
                color=item.color,
                value=item.value,
                percentage=item.percentage,
                transaction_count=item.transaction_count,
            )
            for item in result.breakdown
        ],
        category_colors=result.category_colors,
        total_spent=result.total_spent,
        average_monthly_spending=result.average_monthly_spending,
        transaction_count=result.transaction_count,
    )
