"""Reporting queries - monthly summaries and analytics charts."""

from pennywise.application.queries.reporting.monthly_spending_summary_query import (
    MonthlySpendingSummaryQuery,
)
from pennywise.application.queries.reporting.spending_analytics_query import (
    DEFAULT_TIME_RANGE,
    TIME_RANGES,
    SpendingAnalyticsQuery,
)

__all__ = [
    "DEFAULT_TIME_RANGE",
    "TIME_RANGES",
    "MonthlySpendingSummaryQuery",
    "SpendingAnalyticsQuery",
]
