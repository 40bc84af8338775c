"""
Shared infrastructure for the Homemaidy navigation backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- models: Role and Identity, read by both routing and monitoring

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    HomemaidyError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
)
from .models import Role, Identity

__all__ = [
    "Settings",
    "get_settings",
    "HomemaidyError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "Role",
    "Identity",
]
