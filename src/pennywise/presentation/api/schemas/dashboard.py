"""Dashboard schemas."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pennywise.application.dtos.budgeting import (
    BudgetOverviewDTO,
    CategoryBudgetStatusDTO,
)


class CategoryBudgetStatusResponse(BaseModel):
    """Spending of one category against its budget."""

    category_id: UUID
    name: str
    color: str
    budget_amount: Decimal
    spent: Decimal
    remaining: Decimal
    percentage_used: Decimal = Field(description="Spent / budget on a 0-100+ scale")
    is_over_budget: bool
    transaction_count: int

    @classmethod
    def from_dto(cls, dto: CategoryBudgetStatusDTO) -> "CategoryBudgetStatusResponse":
        return cls(
            category_id=dto.category_id,
            name=dto.name,
            color=dto.color,
            budget_amount=dto.budget_amount,
            spent=dto.spent,
            remaining=dto.remaining,
            percentage_used=dto.percentage_used,
            is_over_budget=dto.is_over_budget,
            transaction_count=dto.transaction_count,
        )


class BudgetOverviewResponse(BaseModel):
    """Budget overview for one month."""

    month: str = Field(description="Month in YYYY-MM format")
    monthly_income: Decimal
    currency: str
    income_set: bool
    categories: list[CategoryBudgetStatusResponse]
    total_budget: Decimal
    total_spent: Decimal
    remaining_budget: Decimal = Field(
        description="Monthly income minus the total allocated budget",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "month": "2024-03",
                "monthly_income": "4200.00",
                "currency": "USD",
                "income_set": True,
                "categories": [],
                "total_budget": "3100.00",
                "total_spent": "1875.40",
                "remaining_budget": "1100.00",
            },
        },
    )

    @classmethod
    def from_dto(cls, dto: BudgetOverviewDTO) -> "BudgetOverviewResponse":
        return cls(
            month=dto.month,
            monthly_income=dto.monthly_income,
            currency=dto.currency,
            income_set=dto.income_set,
            categories=[
                CategoryBudgetStatusResponse.from_dto(c) for c in dto.categories
            ],
            total_budget=dto.total_budget,
            total_spent=dto.total_spent,
            remaining_budget=dto.remaining_budget,
        )
