"""
Pytest configuration for API integration tests.

Provides a TestClient wired to a temporary SQLite database and bearer
tokens signed with the test secret, shaped like the identity provider's.
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pennywise.presentation.api.app import API_V1_PREFIX, create_app
from pennywise.presentation.api.config import get_api_settings
from pennywise.presentation.api.dependencies import get_db_session
from pennywise_auth import JWTService
from pennywise_config.settings import Settings
from tests.shared.fixtures.database import create_schema, run_sync
from tests.shared.fixtures.factories import TestUserFactory

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only-0123456789"


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Settings for API tests."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        jwt_audience="authenticated",
        sqlite_path=str(tmp_path / "pennywise-test.db"),
        api_debug=True,
        api_cors_origins="http://localhost:5173",
        default_currency="USD",
        log_level="WARNING",
    )


@pytest.fixture
def api_v1_prefix() -> str:
    """API v1 prefix for all endpoints."""
    return API_V1_PREFIX


@pytest.fixture
def test_client(async_engine, api_settings):
    """Create a test client with the database on a temporary SQLite file."""
    run_sync(create_schema(async_engine))

    app = create_app(settings=api_settings)

    # Create session factory for the test engine
    test_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    # Override settings to use test settings
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    yield TestClient(app)

    run_sync(async_engine.dispose())


@pytest.fixture
def jwt_service(api_settings) -> JWTService:
    return JWTService(
        secret_key=api_settings.jwt_secret_key.get_secret_value(),
        audience=api_settings.jwt_audience,
    )


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(jwt_service) -> dict:
    """Bearer token for the default test user."""
    token = jwt_service.create_access_token(
        TestUserFactory.DEFAULT_ID,
        TestUserFactory.DEFAULT_EMAIL,
    )
    return _bearer(token)


@pytest.fixture
def alice_headers(jwt_service) -> dict:
    """Bearer token for Alice (multi-user testing)."""
    token = jwt_service.create_access_token(
        TestUserFactory.ALICE_ID,
        TestUserFactory.ALICE_EMAIL,
    )
    return _bearer(token)


@pytest.fixture
def expired_headers(jwt_service) -> dict:
    token = jwt_service.create_access_token(
        TestUserFactory.DEFAULT_ID,
        TestUserFactory.DEFAULT_EMAIL,
        expires_delta=timedelta(seconds=-1),
    )
    return _bearer(token)


@pytest.fixture
def anonymous_headers(jwt_service) -> dict:
    token = jwt_service.create_access_token(
        TestUserFactory.DEFAULT_ID,
        "",
        role="anon",
    )
    return _bearer(token)
