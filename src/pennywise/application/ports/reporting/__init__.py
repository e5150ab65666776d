from pennywise.application.ports.reporting.expense_store import ExpenseStore

__all__ = ["ExpenseStore"]
