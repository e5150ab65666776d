"""Expense schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pennywise.application.dtos.budgeting import ExpenseDTO


class ExpenseResponse(BaseModel):
    """Response schema for an expense with its category."""

    id: UUID
    amount: Decimal
    description: Optional[str] = None
    category_id: UUID
    category_name: Optional[str] = None
    category_color: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_dto(cls, dto: ExpenseDTO) -> "ExpenseResponse":
        return cls(
            id=dto.id,
            amount=dto.amount,
            description=dto.description,
            category_id=dto.category_id,
            category_name=dto.category_name,
            category_color=dto.category_color,
            created_at=dto.created_at,
        )


class ExpenseListResponse(BaseModel):
    expenses: list[ExpenseResponse]
    total: int


class ExpenseCreateRequest(BaseModel):
    """Request schema for recording an expense."""

    amount: Decimal = Field(description="Amount spent, greater than zero")
    category_id: UUID
    description: Optional[str] = Field(None, max_length=500)
    created_at: Optional[datetime] = Field(
        None,
        description="When the money was spent (defaults to now)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": "42.50",
                "category_id": "7f7c2f0c-2f7e-4d55-9f3c-0b8c8f1d2a11",
                "description": "Weekly groceries",
            },
        },
    )


class ExpenseUpdateRequest(BaseModel):
    """Request schema for a partial expense update.

    Send ``"description": null`` to clear the description.
    """

    amount: Optional[Decimal] = None
    category_id: Optional[UUID] = None
    description: Optional[str] = Field(None, max_length=500)
