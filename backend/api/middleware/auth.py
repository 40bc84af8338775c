"""
JWT identity middleware.

Decodes the optional Supabase bearer token of each request into an
Identity and binds it to the request context. The route guard and the
route health monitor both read that binding through the container's
identity provider.
"""

import logging
from typing import Optional
from fastapi import Depends, Request
from jose import jwt, JWTError

from shared.config import get_settings
from shared.exceptions import AuthenticationError, AuthorizationError
from shared.models import Identity, Role
from ..dependencies import get_container, get_identity_provider
from ..models.identity import TokenPayload

logger = logging.getLogger(__name__)


def decode_token(token: str) -> TokenPayload:
    """
    Decode and validate a Supabase JWT token.

    Args:
        token: The JWT token string

    Returns:
        TokenPayload with decoded claims

    Raises:
        AuthenticationError: If token is invalid or expired
    """
    settings = get_settings()

    if not settings.supabase_jwt_secret:
        raise AuthenticationError("Server authentication not configured", code="AUTH_NOT_CONFIGURED")

    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=["HS256"],
            audience="authenticated",
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired", code="TOKEN_EXPIRED")
    except JWTError as e:
        raise AuthenticationError(f"Invalid token: {str(e)}", code="INVALID_TOKEN")


def identity_from_payload(payload: TokenPayload) -> Identity:
    """
    Convert JWT payload to an Identity.

    An unknown marketplace role leaves the identity authenticated
    without a role.
    """
    raw_role = payload.app_metadata.get("role")
    try:
        role = Role(raw_role) if raw_role else None
    except ValueError:
        logger.warning(f"Ignoring unknown role {raw_role!r} for user {payload.sub}")
        role = None

    return Identity(authenticated=True, role=role, user_id=payload.sub)


def identity_from_header(authorization: Optional[str]) -> Identity:
    """
    Resolve the identity for an Authorization header value.

    Missing or invalid credentials yield the anonymous identity: the
    access policy decides what an anonymous caller may see.
    """
    if not authorization:
        return Identity.anonymous()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return Identity.anonymous()

    try:
        return identity_from_payload(decode_token(token))
    except AuthenticationError as e:
        logger.debug(f"Treating request as anonymous: {e.message}")
        return Identity.anonymous()


async def identity_middleware(request: Request, call_next):
    """Bind the request's identity for the duration of the request."""
    provider = get_container().identity
    token = provider.bind(identity_from_header(request.headers.get("Authorization")))
    try:
        return await call_next(request)
    finally:
        provider.reset(token)


async def get_current_identity(provider=Depends(get_identity_provider)) -> Identity:
    """Dependency returning the identity bound to this request."""
    return provider.current() or Identity.anonymous()


def require_role(role: Role):
    """
    Dependency factory that requires an authenticated caller with a role.

    Usage:
        @router.get("/report", dependencies=[Depends(require_role(Role.ADMIN))])
    """

    async def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        if not identity.authenticated:
            raise AuthenticationError("Authentication required", code="MISSING_TOKEN")
        if identity.role != role:
            raise AuthorizationError(
                f"Insufficient permissions. Required: {role.value}, has: "
                f"{identity.role.value if identity.role else 'none'}",
                code="INSUFFICIENT_PERMISSIONS",
                details={"required_role": role.value},
            )
        return identity

    return dependency


RequireAdmin = Depends(require_role(Role.ADMIN))
