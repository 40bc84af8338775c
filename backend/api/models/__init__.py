"""API models package."""

from .identity import TokenPayload, IdentityResponse
from .navigation import CommitNavigationRequest, ChildRoutesResponse
from .errors import ErrorResponse

__all__ = [
    "TokenPayload",
    "IdentityResponse",
    "CommitNavigationRequest",
    "ChildRoutesResponse",
    "ErrorResponse",
]
