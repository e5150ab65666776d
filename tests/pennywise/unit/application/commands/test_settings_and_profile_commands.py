"""Unit tests for the settings and profile commands."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from pennywise.application.commands.profile import UpdateProfileCommand
from pennywise.application.commands.settings import UpdateMonthlyIncomeCommand
from pennywise.domain.budgeting import InvalidAmountError
from pennywise.domain.profile import Profile
from pennywise.domain.settings import UserSettings


class TestUpdateMonthlyIncomeCommand:
    @pytest.mark.asyncio
    async def test_sets_income_and_currency(self, current_user):
        repo = AsyncMock()
        repo.get_or_default.return_value = UserSettings.default(current_user.user_id)

        settings = await UpdateMonthlyIncomeCommand(repo).execute(
            "4200.00",
            currency="eur",
        )

        assert settings.monthly_income == Decimal("4200.00")
        assert settings.currency == "EUR"
        repo.save.assert_awaited_once_with(settings)

    @pytest.mark.asyncio
    async def test_keeps_currency_when_omitted(self, current_user):
        repo = AsyncMock()
        repo.get_or_default.return_value = UserSettings(
            user_id=current_user.user_id,
            currency="GBP",
        )

        settings = await UpdateMonthlyIncomeCommand(repo).execute("0")

        assert settings.currency == "GBP"
        assert settings.income_set is False

    @pytest.mark.asyncio
    async def test_negative_income_not_saved(self, current_user):
        repo = AsyncMock()
        repo.get_or_default.return_value = UserSettings.default(current_user.user_id)

        with pytest.raises(InvalidAmountError):
            await UpdateMonthlyIncomeCommand(repo).execute("-1")

        repo.save.assert_not_awaited()


class TestUpdateProfileCommand:
    @pytest.mark.asyncio
    async def test_changes_email(self, current_user):
        repo = AsyncMock()
        repo.ensure.return_value = Profile(
            id=current_user.user_id,
            email=current_user.email,
        )

        profile = await UpdateProfileCommand(repo, current_user).execute(
            " New@Example.com ",
        )

        assert profile.email == "new@example.com"
        repo.ensure.assert_awaited_once_with(
            current_user.user_id,
            current_user.email,
        )
        repo.save.assert_awaited_once_with(profile)
