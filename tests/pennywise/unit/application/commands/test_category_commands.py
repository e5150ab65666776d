"""Unit tests for the category commands."""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from pennywise.application.commands.budgeting import (
    CategorySetupItem,
    CreateCategoryCommand,
    DeleteCategoryCommand,
    SetupCategoriesCommand,
    UpdateCategoryCommand,
)
from pennywise.domain.budgeting import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidAmountError,
    InvalidColorError,
)
from pennywise.domain.budgeting.value_objects import CUSTOM_CATEGORY_COLORS
from pennywise.domain.shared.exceptions import ValidationError
from tests.shared.fixtures.factories import TestCategoryFactory


@pytest.fixture
def category_repo():
    repo = AsyncMock()
    repo.find_all.return_value = []
    return repo


@pytest.fixture
def expense_repo():
    return AsyncMock()


class TestCreateCategoryCommand:
    @pytest.mark.asyncio
    async def test_creates_and_saves(self, category_repo, current_user):
        command = CreateCategoryCommand(category_repo, current_user)

        category = await command.execute(
            name="Groceries",
            color="#10B981",
            budget_amount="400",
        )

        assert category.user_id == current_user.user_id
        assert category.color == "#10b981"
        assert category.budget_amount == Decimal("400")
        category_repo.save.assert_awaited_once_with(category)

    @pytest.mark.asyncio
    async def test_invalid_color_is_not_saved(self, category_repo, current_user):
        command = CreateCategoryCommand(category_repo, current_user)

        with pytest.raises(InvalidColorError):
            await command.execute(name="Groceries", color="green")

        category_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_existing_name_rejected(self, category_repo, current_user):
        category_repo.find_all.return_value = [TestCategoryFactory.groceries()]
        command = CreateCategoryCommand(category_repo, current_user)

        with pytest.raises(DuplicateCategoryError) as exc_info:
            await command.execute(name=" GROCERIES ")

        assert exc_info.value.details == {"name": "GROCERIES"}
        category_repo.save.assert_not_awaited()

    def test_from_factory(self, current_user):
        factory = Mock()
        factory.current_user = current_user

        command = CreateCategoryCommand.from_factory(factory)

        assert command is not None
        factory.category_repository.assert_called_once()


class TestUpdateCategoryCommand:
    @pytest.mark.asyncio
    async def test_applies_partial_update(self, category_repo):
        category = TestCategoryFactory.groceries()
        category_repo.find_by_id.return_value = category

        result = await UpdateCategoryCommand(category_repo).execute(
            category.id,
            budget_amount=Decimal("450.00"),
        )

        assert result.budget_amount == Decimal("450.00")
        assert result.name == "Groceries"
        assert result.color == "#10b981"
        category_repo.save.assert_awaited_once_with(category)

    @pytest.mark.asyncio
    async def test_unknown_category(self, category_repo):
        category_repo.find_by_id.return_value = None

        with pytest.raises(CategoryNotFoundError):
            await UpdateCategoryCommand(category_repo).execute(uuid4(), name="X")

        category_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_rejected(self, category_repo):
        groceries = TestCategoryFactory.groceries()
        rent = TestCategoryFactory.rent()
        category_repo.find_by_id.return_value = rent
        category_repo.find_all.return_value = [groceries, rent]

        with pytest.raises(DuplicateCategoryError):
            await UpdateCategoryCommand(category_repo).execute(
                rent.id,
                name="groceries",
            )

        category_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rename_keeping_own_name(self, category_repo):
        groceries = TestCategoryFactory.groceries()
        category_repo.find_by_id.return_value = groceries
        category_repo.find_all.return_value = [groceries]

        result = await UpdateCategoryCommand(category_repo).execute(
            groceries.id,
            name="GROCERIES",
        )

        assert result.name == "GROCERIES"
        category_repo.save.assert_awaited_once_with(groceries)


class TestDeleteCategoryCommand:
    @pytest.mark.asyncio
    async def test_deletes_expenses_then_category(self, category_repo, expense_repo):
        category = TestCategoryFactory.groceries()
        category_repo.find_by_id.return_value = category

        order = []
        expense_repo.delete_by_category.side_effect = (
            lambda _: order.append("expenses") or 3
        )
        category_repo.delete.side_effect = lambda _: order.append("category") or True

        deleted = await DeleteCategoryCommand(category_repo, expense_repo).execute(
            category.id,
        )

        assert deleted == 3
        expense_repo.delete_by_category.assert_awaited_once_with(category.id)
        category_repo.delete.assert_awaited_once_with(category.id)
        assert order == ["expenses", "category"]

    @pytest.mark.asyncio
    async def test_unknown_category(self, category_repo, expense_repo):
        category_repo.find_by_id.return_value = None

        with pytest.raises(CategoryNotFoundError):
            await DeleteCategoryCommand(category_repo, expense_repo).execute(uuid4())

        expense_repo.delete_by_category.assert_not_awaited()
        category_repo.delete.assert_not_awaited()


class TestSetupCategoriesCommand:
    @pytest.mark.asyncio
    async def test_preset_and_custom_colors(self, category_repo, current_user):
        command = SetupCategoriesCommand(category_repo, current_user)

        categories = await command.execute(
            [
                CategorySetupItem(name="Groceries", budget_amount="400"),
                CategorySetupItem(name="Climbing", budget_amount="60"),
                CategorySetupItem(name="Books", budget_amount="25"),
                CategorySetupItem(
                    name="Garden",
                    budget_amount="30",
                    color="#123456",
                ),
            ],
        )

        colors = {c.name: c.color for c in categories}
        assert colors == {
            "Groceries": "#10b981",
            "Climbing": CUSTOM_CATEGORY_COLORS[0],
            "Books": CUSTOM_CATEGORY_COLORS[1],
            "Garden": "#123456",
        }
        assert category_repo.save.await_count == 4
        assert all(c.user_id == current_user.user_id for c in categories)

    @pytest.mark.asyncio
    async def test_empty_selection_rejected(self, category_repo, current_user):
        command = SetupCategoriesCommand(category_repo, current_user)

        with pytest.raises(ValidationError, match="at least one"):
            await command.execute([])

    @pytest.mark.asyncio
    async def test_duplicate_names_rejected(self, category_repo, current_user):
        command = SetupCategoriesCommand(category_repo, current_user)

        with pytest.raises(DuplicateCategoryError):
            await command.execute(
                [
                    CategorySetupItem(name="Groceries", budget_amount="400"),
                    CategorySetupItem(name=" groceries ", budget_amount="100"),
                ],
            )

        category_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("budget", ["0", "-10", "abc"])
    async def test_budget_must_be_positive(self, category_repo, current_user, budget):
        command = SetupCategoriesCommand(category_repo, current_user)

        with pytest.raises(InvalidAmountError):
            await command.execute(
                [CategorySetupItem(name="Groceries", budget_amount=budget)],
            )

        category_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_name_of_existing_category_rejected(
        self, category_repo, current_user
    ):
        category_repo.find_all.return_value = [TestCategoryFactory.groceries()]
        command = SetupCategoriesCommand(category_repo, current_user)

        with pytest.raises(DuplicateCategoryError):
            await command.execute(
                [
                    CategorySetupItem(name="Books", budget_amount="25"),
                    CategorySetupItem(name="Groceries", budget_amount="400"),
                ],
            )

        category_repo.save.assert_not_awaited()
