"""Budgeting domain services."""

from pennywise.domain.budgeting.services.monthly_summary_aggregator import (
    MonthlySummaryAggregator,
)

__all__ = ["MonthlySummaryAggregator"]
