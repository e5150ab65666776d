"""Monthly spending aggregation.

Groups expenses by (UTC calendar month, category) and produces one
MonthlySummaryRow per group. The transform is pure: no I/O, no state kept
between calls. Row order is unspecified; use ``sort_chronologically`` when a
stable order is needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Mapping
from uuid import UUID

from pennywise.domain.budgeting.exceptions import MissingCategoryMetadataError
from pennywise.domain.budgeting.value_objects import (
    ZERO,
    CategoryMetadata,
    ExpenseRecord,
    MonthlySummaryRow,
)
from pennywise.domain.shared.time import month_key, parse_month_key

if TYPE_CHECKING:
    from pennywise.domain.budgeting.entities import Expense

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    user_id: UUID
    metadata: CategoryMetadata
    total: Decimal = ZERO
    count: int = 0


class MonthlySummaryAggregator:
    """Turn a flat list of expenses into monthly per-category totals."""

    @staticmethod
    def aggregate(
        expenses: Iterable[Expense],
        categories: Mapping[UUID, CategoryMetadata],
    ) -> list[MonthlySummaryRow]:
        """Group ``expenses`` by month and category.

        Parameters
        ----------
        expenses
            Expenses to group (any order)
        categories
            Display metadata for every category referenced by ``expenses``

        Returns
        -------
        One row per distinct (month, category) pair, in no particular order.

        Raises
        ------
        MissingCategoryMetadataError
            If an expense references a category absent from ``categories``.
        """
        groups: dict[tuple[str, UUID], _Accumulator] = {}

        for expense in expenses:
            metadata = categories.get(expense.category_id)
            if metadata is None:
                raise MissingCategoryMetadataError(
                    category_id=expense.category_id,
                    expense_id=expense.id,
                    amount=expense.amount,
                )

            key = (month_key(expense.created_at), expense.category_id)
            group = groups.get(key)
            if group is None:
                group = _Accumulator(user_id=expense.user_id, metadata=metadata)
                groups[key] = group

            group.total += expense.amount
            group.count += 1

        rows = [
            MonthlySummaryRow(
                user_id=group.user_id,
                category_id=category_id,
                category_name=group.metadata.name,
                category_color=group.metadata.color,
                month=parse_month_key(month),
                total_spent=group.total,
                transaction_count=group.count,
            )
            for (month, category_id), group in groups.items()
        ]
        logger.debug("Aggregated %d monthly summary rows", len(rows))
        return rows

    @staticmethod
    def aggregate_records(records: Iterable[ExpenseRecord]) -> list[MonthlySummaryRow]:
        """Group expense store records, using the metadata they carry.

        Records without category metadata are not added to the lookup, so
        they surface as MissingCategoryMetadataError.
        """
        records = list(records)
        categories = {
            record.category.category_id: record.category
            for record in records
            if record.category is not None
        }
        return MonthlySummaryAggregator.aggregate(
            (record.expense for record in records),
            categories,
        )

    @staticmethod
    def sort_chronologically(
        rows: Iterable[MonthlySummaryRow],
    ) -> list[MonthlySummaryRow]:
        """Sort rows by month ascending, then category name."""
        return sorted(rows, key=_chronological_key)


def _chronological_key(row: MonthlySummaryRow) -> tuple:
    return (row.month, row.category_name.casefold(), str(row.category_id))
