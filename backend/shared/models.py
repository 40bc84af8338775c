"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Role(str, Enum):
    """Marketplace account roles."""

    ADMIN = "admin"
    PROVIDER = "provider"
    CUSTOMER = "customer"


class Identity(BaseModel):
    """
    The caller's current authentication state.

    Owned by the external identity collaborator and only read here.
    The routing policy and the route health monitor must both obtain it
    from the same provider.
    """

    authenticated: bool = Field(default=False, description="Whether a session is active")
    role: Optional[Role] = Field(None, description="Account role, if known")
    user_id: Optional[str] = Field(None, description="User ID (UUID from Supabase)")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }

    @classmethod
    def anonymous(cls) -> "Identity":
        """Identity of a visitor without a session."""
        return cls(authenticated=False)

    @property
    def effective_role(self) -> Optional[Role]:
        """The role, but only while authenticated."""
        return self.role if self.authenticated else None
