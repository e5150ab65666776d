from pennywise.presentation.api.routers.analytics import router as analytics_router
from pennywise.presentation.api.routers.categories import router as categories_router
from pennywise.presentation.api.routers.dashboard import router as dashboard_router
from pennywise.presentation.api.routers.expenses import router as expenses_router
from pennywise.presentation.api.routers.profile import router as profile_router
from pennywise.presentation.api.routers.settings import router as settings_router

__all__ = [
    "analytics_router",
    "categories_router",
    "dashboard_router",
    "expenses_router",
    "profile_router",
    "settings_router",
]
