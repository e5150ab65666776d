"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from pennywise.application.ports.reporting import ExpenseStore
from pennywise.domain.budgeting.repositories import (
    CategoryRepository,
    ExpenseRepository,
)
from pennywise.domain.profile import ProfileRepository
from pennywise.domain.settings import UserSettingsRepository

if TYPE_CHECKING:
    from pennywise.application.ports.identity import CurrentUser


class RepositoryFactory(Protocol):
    """Protocol for creating user-scoped repositories."""

    @property
    def current_user(self) -> CurrentUser:
        """Get the current user for repository scoping."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...

    def expense_repository(self) -> ExpenseRepository:
        """Get expense repository."""
        ...

    def user_settings_repository(self) -> UserSettingsRepository:
        """Get user settings repository."""
        ...

    def profile_repository(self) -> ProfileRepository:
        """Get profile repository."""
        ...

    def expense_store(self) -> ExpenseStore:
        """Get the expense store read port."""
        ...
