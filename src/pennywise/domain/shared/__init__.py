"""Shared domain components.

This module exports shared exceptions and time helpers used across
domain boundaries.
"""

from pennywise.domain.shared.exceptions import (
    AuthenticationError,
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UnauthenticatedError,
    ValidationError,
)
from pennywise.domain.shared.time import today_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "ConflictError",
    "AuthenticationError",
    "UnauthenticatedError",
    # Utilities
    "today_utc",
    "utc_now",
]
