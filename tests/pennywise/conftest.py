"""
Pytest configuration for pennywise tests.

This conftest provides the test users as CurrentUser fixtures.
"""

import pytest

from pennywise.application.ports.identity import CurrentUser
from tests.shared.fixtures.factories import TestUserFactory


@pytest.fixture
def current_user() -> CurrentUser:
    """Provide a CurrentUser for the default test user."""
    return TestUserFactory.default_current_user()


@pytest.fixture
def alice_current_user() -> CurrentUser:
    """Provide a CurrentUser for Alice (multi-user testing)."""
    return TestUserFactory.alice_current_user()


@pytest.fixture
def bob_current_user() -> CurrentUser:
    """Provide a CurrentUser for Bob (multi-user testing)."""
    return TestUserFactory.bob_current_user()
