"""Budget overview for the dashboard."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pennywise.application.dtos.budgeting import (
    BudgetOverviewDTO,
    CategoryBudgetStatusDTO,
)
from pennywise.application.queries.budgeting.list_expenses_query import parse_month
from pennywise.domain.budgeting import CategoryRepository, MonthlySummaryAggregator
from pennywise.domain.budgeting.value_objects import ZERO
from pennywise.domain.settings import UserSettingsRepository
from pennywise.domain.shared.time import (
    first_day_of_month,
    last_day_of_month,
    month_key,
    today_utc,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory
    from pennywise.application.ports.identity import CurrentUser
    from pennywise.application.ports.reporting import ExpenseStore


class BudgetOverviewQuery:
    """Compare each category's spending in a month with its budget.

    Spending comes from the expense store and the monthly summary
    aggregator; categories without expenses show zero spent.
    """

    def __init__(
        self,
        expense_store: ExpenseStore,
        category_repository: CategoryRepository,
        settings_repo: UserSettingsRepository,
        current_user: CurrentUser,
    ):
        self._store = expense_store
        self._category_repo = category_repository
        self._settings_repo = settings_repo
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> BudgetOverviewQuery:
        return cls(
            expense_store=factory.expense_store(),
            category_repository=factory.category_repository(),
            settings_repo=factory.user_settings_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, month: Optional[str] = None) -> BudgetOverviewDTO:
        first = parse_month(month) if month else first_day_of_month(today_utc())

        settings = await self._settings_repo.get_or_default()
        categories = await self._category_repo.find_all()
        records = await self._store.fetch_expenses(
            self._current_user,
            start_date=first,
            end_date=last_day_of_month(first),
        )
        rows = MonthlySummaryAggregator.aggregate_records(records)
        by_category = {row.category_id: row for row in rows}

        statuses = []
        for category in categories:
            row = by_category.get(category.id)
            spent = row.total_spent if row else ZERO
            budget = category.budget_amount
            percentage = (spent / budget * 100) if budget > 0 else Decimal("0")
            statuses.append(
                CategoryBudgetStatusDTO(
                    category_id=category.id,
                    name=category.name,
                    color=category.color,
                    budget_amount=budget,
                    spent=spent,
                    remaining=budget - spent,
                    percentage_used=percentage.quantize(Decimal("0.1")),
                    transaction_count=row.transaction_count if row else 0,
                ),
            )

        total_budget = sum((c.budget_amount for c in categories), ZERO)
        total_spent = sum((s.spent for s in statuses), ZERO)

        return BudgetOverviewDTO(
            month=month_key(first),
            monthly_income=settings.monthly_income,
            currency=settings.currency,
            income_set=settings.income_set,
            categories=statuses,
            total_budget=total_budget,
            total_spent=total_spent,
            remaining_budget=settings.monthly_income - total_budget,
        )
