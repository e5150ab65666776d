"""Expenses router for expense tracking endpoints."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from pennywise.application.commands.budgeting import (
    CreateExpenseCommand,
    DeleteExpenseCommand,
    UpdateExpenseCommand,
)
from pennywise.application.queries.budgeting import ListExpensesQuery
from pennywise.presentation.api.dependencies import RepoFactory
from pennywise.presentation.api.schemas.expenses import (
    ExpenseCreateRequest,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

CategoryFilter = Annotated[
    UUID | None,
    Query(description="Only expenses of this category"),
]
MonthFilter = Annotated[
    str | None,
    Query(pattern=r"^\d{4}-\d{2}$", description="Month (YYYY-MM format, UTC)"),
]


@router.get(
    "",
    summary="List expenses",
    responses={200: {"description": "Expenses, newest first"}},
)
async def list_expenses(
    factory: RepoFactory,
    category_id: CategoryFilter = None,
    month: MonthFilter = None,
) -> ExpenseListResponse:
    result = await ListExpensesQuery.from_factory(factory).execute(
        category_id=category_id,
        month=month,
    )
    return ExpenseListResponse(
        expenses=[ExpenseResponse.from_dto(dto) for dto in result],
        total=len(result),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Record expense",
    responses={
        201: {"description": "Expense recorded"},
        400: {"description": "Invalid amount"},
        404: {"description": "Category not found"},
    },
)
async def create_expense(
    request: ExpenseCreateRequest,
    factory: RepoFactory,
) -> ExpenseResponse:
    command = CreateExpenseCommand.from_factory(factory)

    try:
        dto = await command.execute(
            amount=request.amount,
            category_id=request.category_id,
            description=request.description,
            created_at=request.created_at,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ExpenseResponse.from_dto(dto)


@router.patch(
    "/{expense_id}",
    summary="Update expense",
    responses={
        200: {"description": "Expense updated"},
        404: {"description": "Expense or category not found"},
    },
)
async def update_expense(
    expense_id: UUID,
    request: ExpenseUpdateRequest,
    factory: RepoFactory,
) -> ExpenseResponse:
    command = UpdateExpenseCommand.from_factory(factory)
    changes = {}
    if "description" in request.model_fields_set:
        changes["description"] = request.description

    try:
        dto = await command.execute(
            expense_id=expense_id,
            amount=request.amount,
            category_id=request.category_id,
            **changes,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ExpenseResponse.from_dto(dto)


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete expense",
    responses={404: {"description": "Expense not found"}},
)
async def delete_expense(expense_id: UUID, factory: RepoFactory) -> None:
    command = DeleteExpenseCommand.from_factory(factory)

    try:
        await command.execute(expense_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
