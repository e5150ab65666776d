"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.infrastructure.persistence.sqlalchemy.adapters.reporting import (
    SqlAlchemyExpenseStore,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.budgeting import (
    CategoryRepositorySQLAlchemy,
    ExpenseRepositorySQLAlchemy,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.profile import (
    ProfileRepositorySQLAlchemy,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.settings import (
    UserSettingsRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from pennywise.application.ports.identity import CurrentUser


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    One factory lives for one request: it shares the request's session and
    caches the repositories it hands out.
    """

    def __init__(
        self,
        session: AsyncSession,
        current_user: CurrentUser,
        default_currency: str = "USD",
    ):
        self._session = session
        self._current_user = current_user
        self._default_currency = default_currency

        # Cached instances (created on demand)
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._expense_repo: ExpenseRepositorySQLAlchemy | None = None
        self._expense_store: SqlAlchemyExpenseStore | None = None

    @property
    def current_user(self) -> CurrentUser:
        return self._current_user

    @property
    def session(self) -> AsyncSession:
        return self._session

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(
                self._session,
                self._current_user,
            )
        return self._category_repo

    def expense_repository(self) -> ExpenseRepositorySQLAlchemy:
        if self._expense_repo is None:
            self._expense_repo = ExpenseRepositorySQLAlchemy(
                self._session,
                self._current_user,
            )
        return self._expense_repo

    def user_settings_repository(self) -> UserSettingsRepositorySQLAlchemy:
        return UserSettingsRepositorySQLAlchemy(
            self._session,
            self._current_user,
            default_currency=self._default_currency,
        )

    def profile_repository(self) -> ProfileRepositorySQLAlchemy:
        return ProfileRepositorySQLAlchemy(self._session)

    def expense_store(self) -> SqlAlchemyExpenseStore:
        if self._expense_store is None:
            self._expense_store = SqlAlchemyExpenseStore(self._session)
        return self._expense_store
