"""API configuration adapter.

Bridges the centralized pennywise_config settings with the API layer.
"""

from functools import lru_cache

from pennywise_config.settings import Settings, get_settings


@lru_cache
def get_api_settings() -> Settings:
    """Get settings from centralized configuration.

    Tests override this dependency to inject their own settings.
    """
    return get_settings()
