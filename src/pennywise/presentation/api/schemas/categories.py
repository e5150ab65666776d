"""Category schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pennywise.application.dtos.budgeting import CategoryDTO


class CategoryResponse(BaseModel):
    """Response schema for a budget category."""

    id: UUID
    name: str
    color: str = Field(description="Display color (#rrggbb)")
    budget_amount: Decimal = Field(description="Monthly budget allocation")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: CategoryDTO) -> "CategoryResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            color=dto.color,
            budget_amount=dto.budget_amount,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class CategoryListResponse(BaseModel):
    categories: list[CategoryResponse]
    total: int


class CategoryCreateRequest(BaseModel):
    """Request schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=100)
    color: Optional[str] = Field(None, description="Display color (#rrggbb)")
    budget_amount: Decimal = Field(Decimal("0"), description="Monthly budget")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Groceries",
                "color": "#10b981",
                "budget_amount": "400.00",
            },
        },
    )


class CategoryUpdateRequest(BaseModel):
    """Request schema for a partial category update."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = None
    budget_amount: Optional[Decimal] = None


class CategoryDeleteResponse(BaseModel):
    message: str
    deleted_expenses: int = Field(description="Expenses removed with the category")


class CategoryPresetResponse(BaseModel):
    name: str
    color: str


class CategorySetupItemRequest(BaseModel):
    """One category chosen during onboarding."""

    name: str = Field(..., min_length=1, max_length=100)
    budget_amount: Decimal = Field(description="Monthly budget, greater than zero")
    color: Optional[str] = None


class CategorySetupRequest(BaseModel):
    """Request schema for creating the initial set of categories."""

    categories: list[CategorySetupItemRequest] = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "categories": [
                    {"name": "Groceries", "budget_amount": "400"},
                    {"name": "Rent/Mortgage", "budget_amount": "1200"},
                    {"name": "Climbing", "budget_amount": "60"},
                ],
            },
        },
    )
