"""
Routing module data models.

These models define the route table entries and the tagged results
returned by the access policy and the route guard.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from shared.models import Role


class RouteSpec(BaseModel):
    """
    Declarative access requirements attached to a path pattern.

    A pattern may contain parameter segments (``/admin/bookings/:bookingId``).
    ``allowed_roles=None`` with ``auth_required=True`` means any
    authenticated role.
    """

    path_pattern: str = Field(..., description="Path pattern, e.g. /admin/bookings/:bookingId")
    auth_required: bool = Field(default=False, description="Whether a session is required")
    allowed_roles: Optional[frozenset[Role]] = Field(
        None,
        description="Roles allowed to view the route (None = no role restriction)",
    )

    model_config = {"frozen": True}

    @field_validator("path_pattern")
    @classmethod
    def check_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"Route pattern must start with '/': {value!r}")
        return value

    @field_validator("allowed_roles")
    @classmethod
    def empty_roles_mean_unrestricted(
        cls, value: Optional[frozenset[Role]]
    ) -> Optional[frozenset[Role]]:
        return value or None


class RouteError(str, Enum):
    """Reasons a path is not valid for an identity."""

    ROUTE_NOT_FOUND = "Route not found"
    AUTHENTICATION_REQUIRED = "Authentication required"
    UNAUTHORIZED_ROLE = "Unauthorized role"


class ValidationResult(BaseModel):
    """Outcome of validating a path against an identity."""

    valid: bool
    error: Optional[RouteError] = None

    model_config = {"frozen": True}


class GuardAction(str, Enum):
    """What the view layer should do for a requested path."""

    RENDER = "render"
    REDIRECT = "redirect"
    LOADING = "loading"


class GuardDecision(BaseModel):
    """Render-time decision produced by the route guard."""

    action: GuardAction
    path: str = Field(..., description="The requested path")
    target: Optional[str] = Field(None, description="Redirect target, if redirecting")
    reason: Optional[str] = Field(None, description="Why the guard redirected")

    model_config = {"frozen": True}


class PrefixConflict(BaseModel):
    """A route whose allowed roles disagree with its prefix guard."""

    path_pattern: str
    prefix_role: Role
    allowed_roles: Optional[frozenset[Role]] = None

    model_config = {"frozen": True}
