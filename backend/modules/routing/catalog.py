"""
Route catalog for the Homemaidy marketplace.

The built-in catalog mirrors the pages of the web client. A YAML file can
replace it at bootstrap:

    routes:
      - path: /
      - path: /admin/users
        auth: true
        roles: [admin]
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.models import Role

from .exceptions import RouteCatalogError
from .models import RouteSpec
from .table import RouteTable

logger = logging.getLogger(__name__)


def _public(*paths: str) -> list[RouteSpec]:
    return [RouteSpec(path_pattern=path) for path in paths]


def _protected(role: Role, *paths: str) -> list[RouteSpec]:
    return [
        RouteSpec(path_pattern=path, auth_required=True, allowed_roles=frozenset({role}))
        for path in paths
    ]


DEFAULT_ROUTES: list[RouteSpec] = [
    # Public pages
    *_public(
        "/",
        "/login",
        "/register",
        "/forgot-password",
        "/reset-password",
        "/pro-signup",
        "/pro-application",
        "/services",
        "/about",
        "/contact",
        "/privacy",
        "/terms",
        "/service-areas",
        "/careers",
        "/blog",
        "/faq",
        "/booking",
        "/404",
    ),
    # Customer pages
    *_protected(
        Role.CUSTOMER,
        "/customer-dashboard",
        "/customer-dashboard/bookings",
        "/customer-dashboard/notifications",
        "/customer-dashboard/payments",
        "/customer-dashboard/messages",
        "/customer-dashboard/settings",
    ),
    # Provider pages
    *_protected(
        Role.PROVIDER,
        "/pro-dashboard",
        "/pro/availability",
        "/pro/earnings",
        "/pro/messages",
        "/pro/settings",
    ),
    # Admin pages
    *_public("/admin/login"),
    *_protected(
        Role.ADMIN,
        "/admin/dashboard",
        "/admin/bookings",
        "/admin/bookings/:bookingId",
        "/admin/users",
        "/admin/payments",
        "/admin/reports",
        "/admin/reviews",
        "/admin/promotions",
        "/admin/automations",
        "/admin/crm/leads",
        "/admin/crm/incomplete-bookings",
        "/admin/crm/customers",
        "/admin/settings",
    ),
]


def _parse_entry(entry: dict, source: str) -> RouteSpec:
    if not isinstance(entry, dict) or "path" not in entry:
        raise RouteCatalogError(f"Route entry must be a mapping with a 'path': {entry!r}", source)

    roles = entry.get("roles")
    try:
        return RouteSpec(
            path_pattern=entry["path"],
            auth_required=bool(entry.get("auth", False)),
            allowed_roles=frozenset(Role(role) for role in roles) if roles else None,
        )
    except (ValueError, PydanticValidationError) as e:
        raise RouteCatalogError(f"Invalid route entry {entry!r}: {e}", source)


def load_route_specs(catalog_path: Path) -> list[RouteSpec]:
    """Load route specifications from a YAML catalog.

    Args:
        catalog_path: Path to the YAML catalog file

    Returns:
        Route specifications in file order

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        RouteCatalogError: If the file is not a valid catalog
    """
    source = str(catalog_path)
    with open(catalog_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RouteCatalogError(f"Invalid YAML in route catalog: {e}", source)

    if not isinstance(data, dict) or not isinstance(data.get("routes"), list):
        raise RouteCatalogError("Route catalog must contain a 'routes' list", source)

    return [_parse_entry(entry, source) for entry in data["routes"]]


def build_route_table(settings: Optional[Settings] = None) -> RouteTable:
    """
    Build and freeze the application's route table.

    Uses the YAML catalog when ``route_catalog_path`` is configured,
    the built-in catalog otherwise.
    """
    settings = settings or get_settings()

    if settings.route_catalog_path is not None:
        specs = load_route_specs(settings.route_catalog_path)
        logger.info(f"Loaded {len(specs)} routes from {settings.route_catalog_path}")
    else:
        specs = DEFAULT_ROUTES

    table = RouteTable(specs, strict=settings.strict_routes)
    table.freeze()

    missing = table.missing_parents()
    if missing:
        logger.info(f"{len(missing)} routes have no registered parent route")
    return table
