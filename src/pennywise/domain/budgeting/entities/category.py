"""Budget category entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from pennywise.domain.budgeting.exceptions import InvalidCategoryNameError
from pennywise.domain.budgeting.value_objects import (
    CategoryMetadata,
    normalize_color,
    parse_amount,
)
from pennywise.domain.shared.time import to_utc, utc_now

MAX_NAME_LENGTH = 100


def _validate_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidCategoryNameError(name)
    if len(cleaned) > MAX_NAME_LENGTH:
        raise InvalidCategoryNameError(
            name,
            reason=f"name must be at most {MAX_NAME_LENGTH} characters",
        )
    return cleaned


class Category:
    """
    A user-defined spending bucket with a monthly budget allocation.

    Each category belongs to exactly one user. Expenses point at a category;
    deleting a category removes its expenses first (see DeleteCategoryCommand).
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        user_id: UUID,
        color: Optional[str] = None,
        budget_amount: Decimal | int | str = Decimal("0"),
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """
        Initialize a new category.

        Parameters
        ----------
        name
            Display name (non-empty, trimmed)
        user_id
            Owner user ID
        color
            Display color token (``#rrggbb``); defaults to the app color
        budget_amount
            Monthly allocation, zero or more
        id
            Category ID (generated if not provided, used for reconstitution)
        created_at
            Creation timestamp (defaults to now, used for reconstitution)
        updated_at
            Last modification timestamp (defaults to created_at)
        """
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._name = _validate_name(name)
        self._color = normalize_color(color)
        self._budget_amount = parse_amount(
            budget_amount,
            field_name="budget_amount",
            allow_zero=True,
        )
        self._created_at = to_utc(created_at) if created_at else utc_now()
        self._updated_at = to_utc(updated_at) if updated_at else self._created_at

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        name: str,
        color: str,
        budget_amount: Decimal,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
    ) -> "Category":
        return cls(
            id=id,
            user_id=user_id,
            name=name,
            color=color,
            budget_amount=budget_amount,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def color(self) -> str:
        return self._color

    @property
    def budget_amount(self) -> Decimal:
        return self._budget_amount

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, name: str) -> None:
        self._name = _validate_name(name)
        self._touch()

    def recolor(self, color: str) -> None:
        self._color = normalize_color(color)
        self._touch()

    def change_budget(self, budget_amount: Decimal | int | str) -> None:
        self._budget_amount = parse_amount(
            budget_amount,
            field_name="budget_amount",
            allow_zero=True,
        )
        self._touch()

    def metadata(self) -> CategoryMetadata:
        return CategoryMetadata(
            category_id=self._id,
            name=self._name,
            color=self._color,
        )

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Category(id={self._id}, name={self._name!r}, "
            f"budget_amount={self._budget_amount})"
        )
