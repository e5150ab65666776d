"""
SQLite fixtures for integration tests.

Every test gets its own database file under pytest's ``tmp_path``, so tests
are isolated without any running database server.

Usage:
    # In your test file or conftest.py
    from tests.shared.fixtures.database import db_session

    async def test_something(db_session, current_user):
        repo = CategoryRepositorySQLAlchemy(db_session, current_user)
        await repo.save(category)
"""

import asyncio
from datetime import datetime, timezone
from uuid import UUID

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from pennywise.infrastructure.persistence.sqlalchemy.models import (
    Base,
    ProfileModel,
)
from tests.shared.fixtures.factories import TestUserFactory

# Fixed UUIDs for testing - ensures deterministic behavior
TEST_USER_ID = TestUserFactory.DEFAULT_ID
TEST_USER_EMAIL = TestUserFactory.DEFAULT_EMAIL


@pytest.fixture
def async_engine(tmp_path) -> AsyncEngine:
    """Create an async SQLAlchemy engine on a fresh SQLite file."""
    return create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'pennywise-test.db'}",
        echo=False,
        poolclass=NullPool,  # Avoid connection pool issues in tests
    )


def create_test_profile(user_id: UUID, email: str) -> ProfileModel:
    """Create a profile row for a seeded test user."""
    now = datetime.now(tz=timezone.utc)
    return ProfileModel(
        id=user_id,
        email=email,
        created_at=now,
        updated_at=now,
    )


async def create_schema(async_engine: AsyncEngine, *, seed_users: bool = True):
    """Drop and recreate all tables, optionally seeding the test profiles."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    if not seed_users:
        return

    session_maker = async_sessionmaker(async_engine, class_=AsyncSession)
    async with session_maker() as session:
        for user in TestUserFactory.all_users():
            session.add(create_test_profile(user["id"], user["email"]))
        await session.commit()


def run_sync(coro):
    """Run a coroutine to completion in a fresh event loop.

    The TestClient runs the app in its own loop, so database setup for API
    tests happens outside of pytest-asyncio.
    """
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine):
    """
    Provide an isolated database session for each test.

    This fixture:
    1. Creates all tables on a fresh SQLite file
    2. Seeds the test users' profiles (for FK constraints)
    3. Yields a session
    4. Rolls back any uncommitted changes after the test
    5. Disposes the engine
    """
    await create_schema(async_engine)

    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session

        # Rollback any uncommitted changes
        await session.rollback()

    await async_engine.dispose()
