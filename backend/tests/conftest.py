"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
from jose import jwt
from unittest.mock import patch

from api.dependencies import reset_container
from modules.routing.catalog import DEFAULT_ROUTES
from modules.routing.identity import StaticIdentityProvider
from modules.routing.policy import AccessPolicy
from modules.routing.table import RouteTable
from shared.config import get_settings
from shared.models import Identity, Role


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    role: Optional[str] = None,
    expired: bool = False,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        role: Marketplace role stored in app_metadata
        expired: If True, creates an expired token

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
        "app_metadata": {"role": role} if role else {},
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and settings cache around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def route_table() -> RouteTable:
    """The built-in marketplace route table."""
    table = RouteTable(DEFAULT_ROUTES)
    table.freeze()
    return table


@pytest.fixture
def policy(route_table: RouteTable) -> AccessPolicy:
    return AccessPolicy(route_table)


@pytest.fixture
def anonymous() -> Identity:
    return Identity.anonymous()


@pytest.fixture
def admin() -> Identity:
    return Identity(authenticated=True, role=Role.ADMIN, user_id="admin-1")


@pytest.fixture
def provider() -> Identity:
    return Identity(authenticated=True, role=Role.PROVIDER, user_id="pro-1")


@pytest.fixture
def customer() -> Identity:
    return Identity(authenticated=True, role=Role.CUSTOMER, user_id="customer-1")


@pytest.fixture
def identity_provider(anonymous: Identity) -> StaticIdentityProvider:
    """Settable identity source, anonymous by default."""
    return StaticIdentityProvider(anonymous)


@pytest.fixture
def auth_headers():
    """
    Factory for Authorization headers signed with the test secret.

    Patches the middleware's settings for the duration of the test.
    """
    with patch("api.middleware.auth.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET

        def make(role: Optional[str] = None, user_id: str = "test-user-123") -> dict:
            token = create_test_token(user_id=user_id, role=role)
            return {"Authorization": f"Bearer {token}"}

        yield make
