"""
Base exception classes for the Homemaidy backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.

Note that access decisions are never exceptions: the routing policy and the
monitors return tagged results. These classes cover configuration and
programming errors only.
"""

from typing import Optional, Any


class HomemaidyError(Exception):
    """
    Base exception for all Homemaidy errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(HomemaidyError):
    """Resource not found."""

    pass


class ValidationError(HomemaidyError):
    """Input validation failed."""

    pass


class AuthenticationError(HomemaidyError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(HomemaidyError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConfigurationError(HomemaidyError):
    """The application was wired or configured incorrectly."""

    pass
