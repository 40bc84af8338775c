"""
Tests for the JWT identity middleware.
"""

import pytest
from datetime import datetime, timezone, timedelta
from jose import jwt
from fastapi.testclient import TestClient
from unittest.mock import patch

from api import app
from api.middleware.auth import decode_token, identity_from_header, identity_from_payload
from api.models.identity import TokenPayload
from shared.exceptions import AuthenticationError
from shared.models import Identity, Role

client = TestClient(app)

# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    role: str | None = None,
    expired: bool = False,
) -> str:
    """Create a test JWT token."""
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": "test@example.com",
        "aud": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
        "app_metadata": {"role": role} if role else {},
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


class TestDecodeToken:

    @patch("api.middleware.auth.get_settings")
    def test_valid_token(self, mock_settings):
        """Valid token should decode successfully."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        payload = decode_token(create_test_token(role="admin"))
        assert payload.sub == "test-user-123"
        assert payload.email == "test@example.com"
        assert payload.app_metadata == {"role": "admin"}

    @patch("api.middleware.auth.get_settings")
    def test_expired_token(self, mock_settings):
        """Expired token should raise AuthenticationError."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        with pytest.raises(AuthenticationError) as exc_info:
            decode_token(create_test_token(expired=True))
        assert exc_info.value.code == "TOKEN_EXPIRED"
        assert "expired" in exc_info.value.message.lower()

    @patch("api.middleware.auth.get_settings")
    def test_invalid_token(self, mock_settings):
        """Invalid token should raise AuthenticationError."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        with pytest.raises(AuthenticationError) as exc_info:
            decode_token("invalid-token")
        assert exc_info.value.code == "INVALID_TOKEN"
        assert "Invalid token" in exc_info.value.message

    @patch("api.middleware.auth.get_settings")
    def test_wrong_secret(self, mock_settings):
        """Token signed with another secret should be rejected."""
        mock_settings.return_value.supabase_jwt_secret = "this-is-not-the-real-secret"
        with pytest.raises(AuthenticationError) as exc_info:
            decode_token(create_test_token())
        assert exc_info.value.code == "INVALID_TOKEN"

    @patch("api.middleware.auth.get_settings")
    def test_missing_jwt_secret(self, mock_settings):
        """Missing JWT secret should raise AUTH_NOT_CONFIGURED."""
        mock_settings.return_value.supabase_jwt_secret = ""
        with pytest.raises(AuthenticationError) as exc_info:
            decode_token(create_test_token())
        assert exc_info.value.code == "AUTH_NOT_CONFIGURED"


class TestIdentityConversion:

    def _payload(self, app_metadata: dict) -> TokenPayload:
        return TokenPayload(
            sub="user-123",
            aud="authenticated",
            exp=9999999999,
            iat=1704067200,
            app_metadata=app_metadata,
        )

    def test_identity_from_payload(self):
        """Marketplace role should come from app_metadata."""
        identity = identity_from_payload(self._payload({"role": "provider"}))
        assert identity == Identity(authenticated=True, role=Role.PROVIDER, user_id="user-123")

    def test_identity_without_role(self):
        identity = identity_from_payload(self._payload({}))
        assert identity.authenticated is True
        assert identity.role is None

    def test_identity_with_unknown_role(self):
        """Unknown roles should be dropped, not rejected."""
        identity = identity_from_payload(self._payload({"role": "superuser"}))
        assert identity.authenticated is True
        assert identity.role is None

    def test_missing_header_is_anonymous(self):
        assert identity_from_header(None) == Identity.anonymous()

    def test_non_bearer_header_is_anonymous(self):
        assert identity_from_header("Basic dXNlcjpwYXNz") == Identity.anonymous()

    @patch("api.middleware.auth.get_settings")
    def test_invalid_token_is_anonymous(self, mock_settings):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        assert identity_from_header("Bearer invalid-token") == Identity.anonymous()

    @patch("api.middleware.auth.get_settings")
    def test_valid_header(self, mock_settings):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        identity = identity_from_header(f"Bearer {create_test_token(role='customer')}")
        assert identity.role == Role.CUSTOMER
        assert identity.user_id == "test-user-123"


class TestIdentityEndpoint:

    def test_anonymous_request(self):
        """Request without auth header should resolve to anonymous."""
        response = client.get("/api/identity/me")
        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "role": None, "user_id": None}

    @patch("api.middleware.auth.get_settings")
    def test_authenticated_request(self, mock_settings):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        token = create_test_token(user_id="pro-7", role="provider")
        response = client.get(
            "/api/identity/me",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["role"] == "provider"
        assert data["user_id"] == "pro-7"

    @patch("api.middleware.auth.get_settings")
    def test_expired_token_is_anonymous(self, mock_settings):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        token = create_test_token(expired=True)
        response = client.get(
            "/api/identity/me",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 200
        assert response.json()["authenticated"] is False


class TestRequireRole:

    def test_missing_token(self):
        """Admin endpoint without a token should return 401."""
        response = client.get("/api/navigation/report")
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["error"] == "MISSING_TOKEN"

    @patch("api.middleware.auth.get_settings")
    def test_wrong_role(self, mock_settings):
        """Admin endpoint with a customer token should return 403."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        token = create_test_token(role="customer")
        response = client.get(
            "/api/navigation/report",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 403
        data = response.json()
        assert data["error"] == "INSUFFICIENT_PERMISSIONS"
        assert data["details"] == {"required_role": "admin"}

    @patch("api.middleware.auth.get_settings")
    def test_admin_role(self, mock_settings):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        token = create_test_token(role="admin")
        response = client.get(
            "/api/navigation/report",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 200
