"""Reporting DTOs - data transfer objects for charts."""

from pennywise.application.dtos.reporting.reporting_dto import (
    CategorySpending,
    MonthlySummaryResult,
    SpendingAnalyticsResult,
    SpendingPeriod,
)

__all__ = [
    "CategorySpending",
    "MonthlySummaryResult",
    "SpendingAnalyticsResult",
    "SpendingPeriod",
]
