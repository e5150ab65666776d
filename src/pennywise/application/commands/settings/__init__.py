"""Settings commands."""

from pennywise.application.commands.settings.update_monthly_income_command import (
    UpdateMonthlyIncomeCommand,
)

__all__ = ["UpdateMonthlyIncomeCommand"]
