"""Derived monthly spending aggregate for one category."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class MonthlySummaryRow:
    """Total spent and transaction count of one category in one month.

    Never persisted: recomputed from expenses on every query.
    """

    user_id: UUID
    category_id: UUID
    category_name: str
    category_color: str
    month: date  # first day of the month (UTC)
    total_spent: Decimal
    transaction_count: int

    @property
    def month_key(self) -> str:
        return f"{self.month.year:04d}-{self.month.month:02d}"
