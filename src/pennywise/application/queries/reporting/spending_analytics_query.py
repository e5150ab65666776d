"""Chart-ready spending analytics for a relative time range."""

from __future__ import annotations

from calendar import month_abbr
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pennywise.application.dtos.reporting import (
    CategorySpending,
    SpendingAnalyticsResult,
    SpendingPeriod,
)
from pennywise.domain.budgeting import MonthlySummaryAggregator
from pennywise.domain.budgeting.value_objects import ZERO, MonthlySummaryRow
from pennywise.domain.shared.exceptions import ValidationError
from pennywise.domain.shared.time import months_before, today_utc

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory
    from pennywise.application.ports.identity import CurrentUser
    from pennywise.application.ports.reporting import ExpenseStore

# Supported ranges and how many months each reaches back
TIME_RANGES: dict[str, int] = {
    "3months": 3,
    "6months": 6,
    "1year": 12,
}
DEFAULT_TIME_RANGE = "6months"


def _month_label(month: date) -> str:
    return f"{month_abbr[month.month]} {month.year}"


class SpendingAnalyticsQuery:
    """Build the monthly series and category breakdown for the analytics page.

    The window ends today (UTC) and starts the same day N months earlier.
    Periods are sorted ascending; the breakdown is sorted by amount,
    largest first.
    """

    def __init__(
        self,
        expense_store: ExpenseStore,
        current_user: Optional[CurrentUser],
    ):
        self._store = expense_store
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SpendingAnalyticsQuery:
        return cls(
            expense_store=factory.expense_store(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        time_range: str = DEFAULT_TIME_RANGE,
        today: Optional[date] = None,
    ) -> SpendingAnalyticsResult:
        months = TIME_RANGES.get(time_range)
        if months is None:
            msg = (
                f"Invalid time_range '{time_range}'. "
                f"Valid: {', '.join(TIME_RANGES)}"
            )
            raise ValidationError(msg, details={"time_range": time_range})

        end_date = today or today_utc()
        start_date = months_before(end_date, months)

        records = await self._store.fetch_expenses(
            self._current_user,
            start_date=start_date,
            end_date=end_date,
        )
        rows = MonthlySummaryAggregator.sort_chronologically(
            MonthlySummaryAggregator.aggregate_records(records),
        )

        periods = self._build_periods(rows)
        breakdown = self._build_breakdown(rows)
        total = sum((row.total_spent for row in rows), ZERO)
        average = total / len(periods) if periods else Decimal("0")

        return SpendingAnalyticsResult(
            time_range=time_range,
            start_date=start_date,
            end_date=end_date,
            periods=periods,
            breakdown=breakdown,
            category_colors={item.name: item.color for item in breakdown},
            total_spent=total,
            average_monthly_spending=average.quantize(Decimal("0.01")),
            transaction_count=sum(row.transaction_count for row in rows),
        )

    @staticmethod
    def _build_periods(rows: list[MonthlySummaryRow]) -> list[SpendingPeriod]:
        periods: dict[str, SpendingPeriod] = {}
        for row in rows:
            period = periods.get(row.month_key)
            if period is None:
                period = SpendingPeriod(
                    period=row.month_key,
                    period_label=_month_label(row.month),
                    categories={},
                    total=ZERO,
                )
                periods[row.month_key] = period

            name = row.category_name
            spent = period.categories.get(name, ZERO)
            period.categories[name] = spent + row.total_spent
            period.total += row.total_spent

        return sorted(periods.values(), key=lambda p: p.period)

    @staticmethod
    def _build_breakdown(rows: list[MonthlySummaryRow]) -> list[CategorySpending]:
        first_rows: dict[UUID, MonthlySummaryRow] = {}
        amounts: dict[UUID, Decimal] = {}
        counts: dict[UUID, int] = {}
        for row in rows:
            first_rows.setdefault(row.category_id, row)
            amounts[row.category_id] = (
                amounts.get(row.category_id, ZERO) + row.total_spent
            )
            counts[row.category_id] = (
                counts.get(row.category_id, 0) + row.transaction_count
            )

        total = sum(amounts.values(), ZERO)
        breakdown = []
        for category_id, amount in amounts.items():
            row = first_rows[category_id]
            percentage = (amount / total * 100) if total > 0 else Decimal("0")
            breakdown.append(
                CategorySpending(
                    category_id=str(category_id),
                    name=row.category_name,
                    color=row.category_color,
                    value=amount,
                    percentage=percentage.quantize(Decimal("0.1")),
                    transaction_count=counts[category_id],
                ),
            )

        breakdown.sort(key=lambda item: item.value, reverse=True)
        return breakdown
