"""
Identity models for authentication.

These models represent the identity claims extracted from JWT tokens.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from shared.models import Role


class TokenPayload(BaseModel):
    """JWT token payload structure."""
    model_config = ConfigDict(extra="ignore")  # Ignore extra claims

    sub: str  # User ID
    email: Optional[str] = None
    aud: str  # Audience
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
    role: str = "authenticated"  # Postgres role, not the marketplace role

    # Marketplace role lives in app_metadata.role
    app_metadata: dict = Field(default_factory=dict)


class IdentityResponse(BaseModel):
    """The identity the API resolved for the current request."""

    authenticated: bool
    role: Optional[Role] = None
    user_id: Optional[str] = None
