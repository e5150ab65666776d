"""
Integration tests for the budgeting, settings and profile repositories.

Each test runs against a fresh SQLite database seeded with the test users'
profiles. Repositories are user-scoped: another user's rows must be
invisible to them.
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
import pytest_asyncio

from pennywise.domain.budgeting import Category
from pennywise.domain.settings import UserSettings
from pennywise.infrastructure.persistence.sqlalchemy.repositories import (
    CategoryRepositorySQLAlchemy,
    ExpenseRepositorySQLAlchemy,
    ProfileRepositorySQLAlchemy,
    UserSettingsRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import (
    TestCategoryFactory,
    TestExpenseFactory,
    TestUserFactory,
)

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


def _at(year: int, month: int, day: int, hour: int = 12) -> datetime:
    return datetime(year, month, day, hour, 0, tzinfo=timezone.utc)


class TestCategoryRepository:
    async def test_save_and_find(self, db_session, current_user):
        repo = CategoryRepositorySQLAlchemy(db_session, current_user)
        category = TestCategoryFactory.groceries()

        await repo.save(category)
        found = await repo.find_by_id(category.id)

        assert found is not None
        assert found.name == "Groceries"
        assert found.budget_amount == Decimal("400.00")
        assert found.created_at.tzinfo is not None

    async def test_find_all_newest_first(self, db_session, current_user):
        repo = CategoryRepositorySQLAlchemy(db_session, current_user)
        older = TestCategoryFactory.groceries(created_at=_at(2024, 1, 1))
        newer = TestCategoryFactory.rent(created_at=_at(2024, 2, 1))
        await repo.save(older)
        await repo.save(newer)

        categories = await repo.find_all()

        assert [c.id for c in categories] == [newer.id, older.id]

    async def test_update_existing(self, db_session, current_user):
        repo = CategoryRepositorySQLAlchemy(db_session, current_user)
        category = TestCategoryFactory.groceries()
        await repo.save(category)

        category.rename("Food")
        category.change_budget("500")
        await repo.save(category)
        await db_session.commit()

        found = await repo.find_by_id(category.id)
        assert found.name == "Food"
        assert found.budget_amount == Decimal("500")

    async def test_user_isolation(
        self,
        db_session,
        current_user,
        alice_current_user,
    ):
        owner_repo = CategoryRepositorySQLAlchemy(db_session, current_user)
        alice_repo = CategoryRepositorySQLAlchemy(db_session, alice_current_user)
        category = TestCategoryFactory.groceries()
        await owner_repo.save(category)

        assert await alice_repo.find_by_id(category.id) is None
        assert await alice_repo.find_all() == []
        assert await alice_repo.delete(category.id) is False
        assert await owner_repo.find_by_id(category.id) is not None

    async def test_delete(self, db_session, current_user):
        repo = CategoryRepositorySQLAlchemy(db_session, current_user)
        category = TestCategoryFactory.groceries()
        await repo.save(category)

        assert await repo.delete(category.id) is True
        assert await repo.find_by_id(category.id) is None
        assert await repo.delete(category.id) is False


class TestExpenseRepository:
    @pytest_asyncio.fixture
    async def categories(self, db_session, current_user):
        repo = CategoryRepositorySQLAlchemy(db_session, current_user)
        groceries = TestCategoryFactory.groceries()
        rent = TestCategoryFactory.rent()
        await repo.save(groceries)
        await repo.save(rent)
        return groceries, rent

    async def test_amount_round_trips_exactly(
        self,
        db_session,
        current_user,
        categories,
    ):
        groceries, _ = categories
        repo = ExpenseRepositorySQLAlchemy(db_session, current_user)
        expense = TestExpenseFactory.expense(groceries.id, "0.10")
        await repo.save(expense)
        await db_session.commit()
        db_session.expunge_all()

        found = await repo.find_by_id(expense.id)

        assert found.amount == Decimal("0.10")
        assert found.created_at == expense.created_at

    async def test_find_all_filters_and_orders(
        self,
        db_session,
        current_user,
        categories,
    ):
        groceries, rent = categories
        repo = ExpenseRepositorySQLAlchemy(db_session, current_user)
        jan = TestExpenseFactory.expense(groceries.id, "10.00", _at(2024, 1, 5))
        feb = TestExpenseFactory.expense(groceries.id, "20.00", _at(2024, 2, 5))
        feb_rent = TestExpenseFactory.expense(rent.id, "30.00", _at(2024, 2, 9))
        for expense in (jan, feb, feb_rent):
            await repo.save(expense)

        everything = await repo.find_all()
        groceries_only = await repo.find_all(category_id=groceries.id)
        february = await repo.find_all(
            start=_at(2024, 2, 1, 0),
            end_exclusive=_at(2024, 3, 1, 0),
        )

        assert [e.id for e in everything] == [feb_rent.id, feb.id, jan.id]
        assert [e.id for e in groceries_only] == [feb.id, jan.id]
        assert [e.id for e in february] == [feb_rent.id, feb.id]

    async def test_update_existing(self, db_session, current_user, categories):
        groceries, rent = categories
        repo = ExpenseRepositorySQLAlchemy(db_session, current_user)
        expense = TestExpenseFactory.expense(groceries.id, "10.00")
        await repo.save(expense)

        expense.change_amount("12.50")
        expense.move_to_category(rent.id)
        await repo.save(expense)

        found = await repo.find_by_id(expense.id)
        assert found.amount == Decimal("12.50")
        assert found.category_id == rent.id

    async def test_delete_by_category_counts_rows(
        self,
        db_session,
        current_user,
        categories,
    ):
        groceries, rent = categories
        repo = ExpenseRepositorySQLAlchemy(db_session, current_user)
        for amount in ("1.00", "2.00", "3.00"):
            await repo.save(TestExpenseFactory.expense(groceries.id, amount))
        await repo.save(TestExpenseFactory.expense(rent.id, "4.00"))

        deleted = await repo.delete_by_category(groceries.id)

        assert deleted == 3
        remaining = await repo.find_all()
        assert [e.category_id for e in remaining] == [rent.id]

    async def test_user_isolation(
        self,
        db_session,
        current_user,
        bob_current_user,
        categories,
    ):
        groceries, _ = categories
        owner_repo = ExpenseRepositorySQLAlchemy(db_session, current_user)
        bob_repo = ExpenseRepositorySQLAlchemy(db_session, bob_current_user)
        expense = TestExpenseFactory.expense(groceries.id, "9.00")
        await owner_repo.save(expense)

        assert await bob_repo.find_by_id(expense.id) is None
        assert await bob_repo.find_all() == []
        assert await bob_repo.delete(expense.id) is False
        assert await bob_repo.delete_by_category(groceries.id) == 0
        assert await owner_repo.find_by_id(expense.id) is not None


class TestUserSettingsRepository:
    async def test_defaults_when_nothing_stored(self, db_session, current_user):
        repo = UserSettingsRepositorySQLAlchemy(
            db_session,
            current_user,
            default_currency="EUR",
        )

        settings = await repo.get_or_default()

        assert settings.monthly_income == Decimal("0")
        assert settings.currency == "EUR"
        assert await repo.find() is None

    async def test_save_is_an_upsert(self, db_session, current_user):
        repo = UserSettingsRepositorySQLAlchemy(db_session, current_user)
        settings = UserSettings.default(current_user.user_id)
        settings.set_monthly_income("3000")
        await repo.save(settings)

        settings.set_monthly_income("3500.50")
        settings.set_currency("GBP")
        await repo.save(settings)
        await db_session.commit()

        stored = await repo.find()
        assert stored.monthly_income == Decimal("3500.50")
        assert stored.currency == "GBP"

    async def test_user_isolation(self, db_session, current_user, alice_current_user):
        await UserSettingsRepositorySQLAlchemy(db_session, current_user).save(
            UserSettings(user_id=current_user.user_id, monthly_income=Decimal("10")),
        )

        alice_repo = UserSettingsRepositorySQLAlchemy(db_session, alice_current_user)

        assert await alice_repo.find() is None


class TestProfileRepository:
    async def test_seeded_profile_found(self, db_session):
        repo = ProfileRepositorySQLAlchemy(db_session)

        profile = await repo.find_by_id(TestUserFactory.ALICE_ID)

        assert profile is not None
        assert profile.email == TestUserFactory.ALICE_EMAIL

    async def test_ensure_creates_missing_profile(self, db_session):
        repo = ProfileRepositorySQLAlchemy(db_session)
        user_id = uuid4()

        created = await repo.ensure(user_id, "New.User@Example.com")
        again = await repo.ensure(user_id, "ignored@example.com")

        assert created.email == "new.user@example.com"
        assert again.email == "new.user@example.com"

    async def test_save_updates_email(self, db_session):
        repo = ProfileRepositorySQLAlchemy(db_session)
        profile = await repo.find_by_id(TestUserFactory.BOB_ID)

        profile.change_email("robert@example.com")
        await repo.save(profile)

        found = await repo.find_by_id(TestUserFactory.BOB_ID)
        assert found.email == "robert@example.com"


async def test_category_created_for_other_user_is_stored_with_owner(
    db_session,
    alice_current_user,
):
    repo = CategoryRepositorySQLAlchemy(db_session, alice_current_user)
    category = Category(name="Climbing", user_id=alice_current_user.user_id)

    await repo.save(category)

    found = await repo.find_by_id(category.id)
    assert found.user_id == TestUserFactory.ALICE_ID
