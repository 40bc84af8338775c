"""
Routing module.

Declares the navigable paths of the marketplace and decides access to them.

Public API:
- RouteTable: Registry of path patterns with deterministic matching
- AccessPolicy: validate() / redirect_for() over a route table
- RouteGuard: Render-time render/redirect/loading decision
- IIdentityProvider: Interface for the single identity source
- Path helpers: parent_of, breadcrumb_valid, breadcrumb_trail
"""

from .interfaces import IIdentityProvider
from .models import (
    RouteSpec,
    RouteError,
    ValidationResult,
    GuardAction,
    GuardDecision,
    PrefixConflict,
)
from .exceptions import RouteConflictError, RouteTableFrozenError, RouteCatalogError
from .table import RouteTable
from .paths import parent_of, breadcrumb_trail, breadcrumb_valid
from .policy import AccessPolicy, home_dashboard, login_target, prefix_role
from .guard import RouteGuard
from .identity import StaticIdentityProvider, ContextIdentityProvider
from .catalog import DEFAULT_ROUTES, build_route_table, load_route_specs

__all__ = [
    # Interface
    "IIdentityProvider",
    # Models
    "RouteSpec",
    "RouteError",
    "ValidationResult",
    "GuardAction",
    "GuardDecision",
    "PrefixConflict",
    # Exceptions
    "RouteConflictError",
    "RouteTableFrozenError",
    "RouteCatalogError",
    # Services
    "RouteTable",
    "AccessPolicy",
    "RouteGuard",
    "StaticIdentityProvider",
    "ContextIdentityProvider",
    # Helpers
    "parent_of",
    "breadcrumb_trail",
    "breadcrumb_valid",
    "home_dashboard",
    "login_target",
    "prefix_role",
    "DEFAULT_ROUTES",
    "build_route_table",
    "load_route_specs",
]
