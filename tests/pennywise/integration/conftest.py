"""
Pytest configuration for pennywise integration tests.

Integration tests run against a temporary SQLite database per test.
Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
# These are automatically available to all tests in this directory
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
)

__all__ = [
    "async_engine",
    "db_session",
]
