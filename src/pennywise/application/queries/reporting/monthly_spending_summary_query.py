"""Monthly spending summary over an optional date window."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from pennywise.application.dtos.reporting import MonthlySummaryResult
from pennywise.domain.budgeting import MonthlySummaryAggregator
from pennywise.domain.budgeting.value_objects import ZERO
from pennywise.domain.shared.exceptions import ErrorCode, ValidationError

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory
    from pennywise.application.ports.identity import CurrentUser
    from pennywise.application.ports.reporting import ExpenseStore

logger = logging.getLogger(__name__)


class MonthlySpendingSummaryQuery:
    """Fetch a user's expenses and group them into monthly category totals.

    The identity is handed to the expense store on every call. A missing
    identity, a storage failure and an expense with an unknown category
    all surface as their own exceptions.
    """

    def __init__(
        self,
        expense_store: ExpenseStore,
        current_user: Optional[CurrentUser],
    ):
        self._store = expense_store
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> MonthlySpendingSummaryQuery:
        return cls(
            expense_store=factory.expense_store(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> MonthlySummaryResult:
        if start_date and end_date and start_date > end_date:
            msg = "start_date must not be after end_date"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_DATE,
                details={
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                },
            )

        records = await self._store.fetch_expenses(
            self._current_user,
            start_date=start_date,
            end_date=end_date,
        )
        rows = MonthlySummaryAggregator.sort_chronologically(
            MonthlySummaryAggregator.aggregate_records(records),
        )
        logger.debug(
            "Monthly summary: %d expenses -> %d rows",
            len(records),
            len(rows),
        )
        return MonthlySummaryResult(
            rows=rows,
            start_date=start_date,
            end_date=end_date,
            total_spent=sum((row.total_spent for row in rows), ZERO),
            transaction_count=sum(row.transaction_count for row in rows),
        )
