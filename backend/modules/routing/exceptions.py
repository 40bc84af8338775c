"""
Routing module exceptions.

Access decisions are returned as ``RouteError`` tags, not raised.
These exceptions only signal a broken route table at bootstrap.
"""

from shared.exceptions import ConfigurationError


class RouteConflictError(ConfigurationError):
    """Raised by a strict route table when two patterns are ambiguous."""

    def __init__(self, pattern: str, existing: str):
        super().__init__(
            f"Route pattern {pattern!r} is ambiguous with {existing!r}",
            code="ROUTE_CONFLICT",
            details={"pattern": pattern, "existing": existing},
        )


class RouteTableFrozenError(ConfigurationError):
    """Raised when registering routes after bootstrap."""

    def __init__(self, pattern: str):
        super().__init__(
            f"Route table is frozen; cannot register {pattern!r}",
            code="ROUTE_TABLE_FROZEN",
            details={"pattern": pattern},
        )


class RouteCatalogError(ConfigurationError):
    """Raised when a route catalog file cannot be parsed."""

    def __init__(self, message: str, source: str):
        super().__init__(
            message,
            code="INVALID_ROUTE_CATALOG",
            details={"source": source},
        )
