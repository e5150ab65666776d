"""Root pytest configuration.

Test Structure:
    tests/
    ├── pennywise/             # Budgeting backend tests
    │   ├── unit/              # Fast, isolated tests (mocked ports)
    │   └── integration/       # Tests against a temporary SQLite database
    └── shared/                # Shared fixtures and utilities

Integration tests need no external services; each test gets its own SQLite
file under pytest's ``tmp_path``.

Environment Variables:
    SKIP_INTEGRATION=1   Skip @pytest.mark.integration tests

Pytest Options:
    --skip-integration   Skip integration tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from pennywise_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--skip-integration",
        action="store_true",
        default=False,
        help="Skip tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when asked to (e.g. for a quick unit run)."""
    skip_integration = config.getoption("--skip-integration") or os.environ.get(
        "SKIP_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if not skip_integration:
        return

    skip_marker = pytest.mark.skip(
        reason="Integration test - skipped via --skip-integration",
    )
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_marker)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure every test session starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
