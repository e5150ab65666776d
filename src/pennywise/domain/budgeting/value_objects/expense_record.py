"""An expense joined with its owning category's display metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pennywise.domain.budgeting.entities import Expense
    from pennywise.domain.budgeting.value_objects.category_metadata import (
        CategoryMetadata,
    )


@dataclass(frozen=True)
class ExpenseRecord:
    """One row fetched by the expense store.

    ``category`` is ``None`` only when the store could not resolve the
    expense's category (a dangling reference).
    """

    expense: Expense
    category: CategoryMetadata | None
