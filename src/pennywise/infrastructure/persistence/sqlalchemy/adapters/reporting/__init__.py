from pennywise.infrastructure.persistence.sqlalchemy.adapters.reporting.sqlalchemy_expense_store import (  # NOQA: E501
    SqlAlchemyExpenseStore,
)

__all__ = ["SqlAlchemyExpenseStore"]
