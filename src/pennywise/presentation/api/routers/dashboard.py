"""Dashboard router for the monthly budget overview."""

from typing import Annotated

from fastapi import APIRouter, Query

from pennywise.application.queries.budgeting import BudgetOverviewQuery
from pennywise.presentation.api.dependencies import RepoFactory
from pennywise.presentation.api.schemas.dashboard import BudgetOverviewResponse

router = APIRouter()

MonthParam = Annotated[
    str | None,
    Query(
        pattern=r"^\d{4}-\d{2}$",
        description="Month (YYYY-MM format). Defaults to the current UTC month",
    ),
]


@router.get(
    "/overview",
    summary="Get budget overview",
    responses={200: {"description": "Income, budgets and spending for a month"}},
)
async def get_overview(
    factory: RepoFactory,
    month: MonthParam = None,
) -> BudgetOverviewResponse:
    """
    Budget overview for one month.

    Per category: budget, spent, remaining and percentage used (0 when the
    budget is 0). `remaining_budget` is monthly income minus the total
    allocated budget.
    """
    result = await BudgetOverviewQuery.from_factory(factory).execute(month=month)
    return BudgetOverviewResponse.from_dto(result)
