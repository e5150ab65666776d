"""Budgeting domain exceptions."""

from decimal import Decimal
from typing import Any
from uuid import UUID

from pennywise.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a budget category cannot be found for the current user."""

    def __init__(self, category_id: str | UUID | None = None) -> None:
        identifier = category_id or "unknown"
        super().__init__(
            message=f"Category '{identifier}' not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": str(category_id) if category_id else None},
        )


class ExpenseNotFoundError(EntityNotFoundError):
    """Raised when an expense cannot be found for the current user."""

    def __init__(self, expense_id: str | UUID | None = None) -> None:
        identifier = expense_id or "unknown"
        super().__init__(
            message=f"Expense '{identifier}' not found",
            code=ErrorCode.EXPENSE_NOT_FOUND,
            details={"expense_id": str(expense_id) if expense_id else None},
        )


class InvalidAmountError(ValidationError):
    """Raised when a monetary amount is malformed or out of range."""

    def __init__(
        self,
        value: Any,
        reason: str,
        field_name: str = "amount",
    ) -> None:
        super().__init__(
            message=f"Invalid {field_name} '{value}': {reason}",
            code=ErrorCode.INVALID_AMOUNT,
            details={"field": field_name, "value": str(value), "reason": reason},
        )


class InvalidColorError(ValidationError):
    """Raised when a category color is not a ``#rrggbb`` token."""

    def __init__(self, color: str) -> None:
        super().__init__(
            message=f"Invalid color '{color}': expected a hex token like '#10b981'",
            code=ErrorCode.INVALID_COLOR,
            details={"color": color},
        )


class InvalidCategoryNameError(ValidationError):
    """Raised when a category name is empty or too long."""

    def __init__(self, name: str, reason: str = "name must not be empty") -> None:
        super().__init__(
            message=f"Invalid category name '{name}': {reason}",
            code=ErrorCode.INVALID_CATEGORY_NAME,
            details={"name": name, "reason": reason},
        )


class DuplicateCategoryError(ValidationError):
    """Raised when a category name is already taken (case-insensitive)."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Category '{name}' already exists",
            code=ErrorCode.DUPLICATE_CATEGORY,
            details={"name": name},
        )


class MissingCategoryMetadataError(DomainException):
    """Raised when an expense references a category whose metadata is unknown.

    Referential integrity is expected to be enforced by the store, so this
    indicates corrupt or inconsistent input rather than a user mistake.
    """

    def __init__(
        self,
        category_id: str | UUID,
        expense_id: str | UUID | None = None,
        amount: Decimal | None = None,
    ) -> None:
        super().__init__(
            message=f"No category metadata for category '{category_id}'",
            code=ErrorCode.MISSING_CATEGORY_METADATA,
            details={
                "category_id": str(category_id),
                "expense_id": str(expense_id) if expense_id else None,
                "amount": str(amount) if amount is not None else None,
            },
        )
