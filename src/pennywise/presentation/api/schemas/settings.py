"""User settings schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pennywise.domain.settings import UserSettings


class UserSettingsResponse(BaseModel):
    """The user's budgeting settings."""

    monthly_income: Decimal = Field(description="Monthly income (0 = not set)")
    currency: str = Field(description="ISO 4217 currency code")
    income_set: bool = Field(description="True once an income above zero is stored")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "monthly_income": "4200.00",
                "currency": "USD",
                "income_set": True,
            },
        },
    )

    @classmethod
    def from_domain(cls, settings: UserSettings) -> "UserSettingsResponse":
        return cls(
            monthly_income=settings.monthly_income,
            currency=settings.currency,
            income_set=settings.income_set,
        )


class UserSettingsUpdateRequest(BaseModel):
    """Request schema for setting the monthly income."""

    monthly_income: Decimal = Field(description="Monthly income, zero or more")
    currency: Optional[str] = Field(
        None,
        min_length=3,
        max_length=3,
        description="ISO 4217 currency code",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"monthly_income": "4200.00"}},
    )
