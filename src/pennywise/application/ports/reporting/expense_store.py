"""Expense store read port.

The read-side contract the reporting queries depend on. The user identity
is an explicit argument of every call instead of being captured when the
store is built, so one store instance can never leak data across users.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional, Protocol

from pennywise.domain.budgeting.value_objects import ExpenseRecord

if TYPE_CHECKING:
    from pennywise.application.ports.identity import CurrentUser


class ExpenseStore(Protocol):
    """Fetch a user's expenses joined with their category metadata."""

    async def fetch_expenses(
        self,
        user: Optional[CurrentUser],
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[ExpenseRecord]:
        """Return the user's expenses inside the inclusive date window.

        Bounds are calendar dates compared against UTC timestamps; either
        may be omitted. Results are ordered by ``created_at`` descending.

        Raises
        ------
        UnauthenticatedError
            If ``user`` is None.
        sqlalchemy.exc.SQLAlchemyError
            Storage failures are propagated unchanged.
        """
        ...
