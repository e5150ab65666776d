"""Expense entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from pennywise.domain.budgeting.value_objects import parse_amount
from pennywise.domain.shared.time import to_utc, utc_now

MAX_DESCRIPTION_LENGTH = 500


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    cleaned = description.strip()
    if not cleaned:
        return None
    return cleaned[:MAX_DESCRIPTION_LENGTH]


class Expense:
    """
    A single spending transaction recorded against a category.

    Amounts are strictly positive ``Decimal`` values. ``created_at`` is
    always stored in UTC, which is also the timezone used for monthly
    grouping.
    """

    def __init__(  # NOQA: PLR0913
        self,
        amount: Decimal | int | str,
        category_id: UUID,
        user_id: UUID,
        description: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._category_id = category_id
        self._amount = parse_amount(amount)
        self._description = _clean_description(description)
        self._created_at = to_utc(created_at) if created_at else utc_now()

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        category_id: UUID,
        amount: Decimal,
        description: Optional[str],
        created_at: datetime,
    ) -> "Expense":
        return cls(
            id=id,
            user_id=user_id,
            category_id=category_id,
            amount=amount,
            description=description,
            created_at=created_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def category_id(self) -> UUID:
        return self._category_id

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def change_amount(self, amount: Decimal | int | str) -> None:
        self._amount = parse_amount(amount)

    def change_description(self, description: Optional[str]) -> None:
        self._description = _clean_description(description)

    def move_to_category(self, category_id: UUID) -> None:
        self._category_id = category_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expense):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Expense(id={self._id}, amount={self._amount}, "
            f"category_id={self._category_id}, created_at={self._created_at})"
        )
