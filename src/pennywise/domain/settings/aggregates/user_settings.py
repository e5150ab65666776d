"""UserSettings aggregate holding a user's budgeting preferences."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from pennywise.domain.budgeting.value_objects import ZERO, parse_amount

DEFAULT_CURRENCY = "USD"


@dataclass
class UserSettings:
    """Per-user budgeting settings.

    This aggregate is keyed by user_id (not a generated ID).
    ``monthly_income`` of zero means the user has not set an income yet.
    """

    user_id: UUID
    monthly_income: Decimal = ZERO
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def default(cls, user_id: UUID, currency: str = DEFAULT_CURRENCY) -> "UserSettings":
        """Create default settings for a user."""
        return cls(user_id=user_id, monthly_income=ZERO, currency=currency)

    @property
    def income_set(self) -> bool:
        return self.monthly_income > ZERO

    def set_monthly_income(self, monthly_income: Decimal | int | str) -> None:
        self.monthly_income = parse_amount(
            monthly_income,
            field_name="monthly_income",
            allow_zero=True,
        )

    def set_currency(self, currency: str) -> None:
        self.currency = currency.strip().upper()
