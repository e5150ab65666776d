"""FastAPI dependency injection for the Pennywise API.

Provides dependencies for:
- Database sessions
- Authentication (current user from the identity provider's JWT)
- Repository factory scoped to the current user
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pennywise.application.ports.identity import CurrentUser
from pennywise.infrastructure.persistence.sqlalchemy.repositories import (
    ProfileRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
)
from pennywise.presentation.api.config import get_api_settings
from pennywise_auth import InvalidTokenError, JWTService
from pennywise_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """Get database URL from application settings."""
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured for the identity provider's tokens."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        audience=settings.jwt_audience,
        algorithm=settings.jwt_algorithm,
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> CurrentUser:
    """
    FastAPI dependency resolving the authenticated user from the bearer token.

    The first request of a new user also creates their profile row.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, expired or anonymous
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    # Signed-out sessions of the provider carry a valid but anonymous token
    if payload.is_anonymous():
        logger.warning("Anonymous token used for user: %s", payload.user_id)
        raise _unauthorized("Authentication required")

    profile_repo = ProfileRepositorySQLAlchemy(session)
    if await profile_repo.find_by_id(payload.user_id) is None:
        await profile_repo.ensure(payload.user_id, payload.email)
        await session.commit()

    return CurrentUser(user_id=payload.user_id, email=payload.email)


# Type alias for injected current user
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    current_user: CurrentUser = Depends(get_current_user),
    settings: Settings = Depends(get_api_settings),
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for the current user.

    The factory creates user-scoped repositories for domain operations.
    """
    return SQLAlchemyRepositoryFactory(
        session=session,
        current_user=current_user,
        default_currency=settings.default_currency,
    )


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def list_categories(factory: RepoFactory):
#       query = ListCategoriesQuery.from_factory(factory)  # NOQA: ERA001
