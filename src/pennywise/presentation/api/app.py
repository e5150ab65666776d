"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with ``uvicorn --factory pennywise.presentation.api.app:create_app``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from pennywise.infrastructure.persistence.sqlalchemy.models import Base
from pennywise.presentation.api.dependencies import get_engine
from pennywise.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from pennywise.presentation.api.routers import (
    analytics_router,
    categories_router,
    dashboard_router,
    expenses_router,
    profile_router,
    settings_router,
)
from pennywise.presentation.api.schemas import ErrorResponse, HealthResponse
from pennywise_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str = "INFO") -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for pennywise modules and WARNING for noisy third-party libraries.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("pennywise").setLevel(log_level)
    logging.getLogger("pennywise_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Profile",
        "description": """The authenticated user's profile.

Authentication is handled by the identity provider; every request carries
its access token as `Authorization: Bearer <token>`. A profile is created
on the first authenticated request.
""",
    },
    {
        "name": "Settings",
        "description": """Budgeting settings.

- `monthly_income` - income the budget is planned against (0 = not set)
- `currency` - display currency
""",
    },
    {
        "name": "Categories",
        "description": """Spending categories with monthly budgets.

**Onboarding:**
- `/categories/presets` - suggested categories with colors
- `/categories/setup` - create the first categories in one request

**Deleting** a category also deletes every expense filed under it.
""",
    },
    {
        "name": "Expenses",
        "description": """Expense tracking.

Amounts are decimals greater than zero. Timestamps are stored in UTC;
filter by `month` (YYYY-MM) and/or `category_id`.
""",
    },
    {
        "name": "Dashboard",
        "description": """Budget overview for a month.

Income, total budget, total spent and per-category progress
(`percentage_used`, `is_over_budget`).
""",
    },
    {
        "name": "Analytics",
        "description": """Spending analytics for charts.

- `/analytics/monthly-summary` - totals per (month, category)
- `/analytics/spending` - monthly series and category breakdown for the
  last 3, 6 or 12 months
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Pennywise API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down Pennywise API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter(
        responses={
            401: {"model": ErrorResponse, "description": "Missing or invalid token"},
            503: {"model": ErrorResponse, "description": "Data store unavailable"},
        },
    )

    v1_router.include_router(profile_router, prefix="/profile", tags=["Profile"])
    v1_router.include_router(settings_router, prefix="/settings", tags=["Settings"])
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(expenses_router, prefix="/expenses", tags=["Expenses"])
    v1_router.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])
    v1_router.include_router(analytics_router, prefix="/analytics", tags=["Analytics"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "A **personal budgeting** service: monthly income, category "
            "budgets, expense tracking and spending analytics."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (unversioned, for load balancers)."""
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "profile": f"{API_V1_PREFIX}/profile",
                "settings": f"{API_V1_PREFIX}/settings",
                "categories": f"{API_V1_PREFIX}/categories",
                "expenses": f"{API_V1_PREFIX}/expenses",
                "dashboard": f"{API_V1_PREFIX}/dashboard",
                "analytics": f"{API_V1_PREFIX}/analytics",
            },
        }

    return app
