"""Application ports (interfaces implemented by infrastructure)."""

from pennywise.application.ports.identity import CurrentUser
from pennywise.application.ports.reporting import ExpenseStore

__all__ = ["CurrentUser", "ExpenseStore"]
