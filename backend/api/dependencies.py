"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together the routing and
monitoring services. Every service is built once per container and shared
by reference, so all requests see the same route table, navigation
history and route check cache.

The identity provider is request-scoped through a ContextVar: the
container holds one ContextIdentityProvider and the identity middleware
binds each request's identity into it.
"""

import logging
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports (avoids import cycles and eager construction)
if TYPE_CHECKING:
    from modules.routing.table import RouteTable
    from modules.routing.policy import AccessPolicy
    from modules.routing.guard import RouteGuard
    from modules.routing.identity import ContextIdentityProvider
    from modules.monitoring.interfaces import IPageRegistry
    from modules.monitoring.probe import ComponentProbe
    from modules.monitoring.navigation import NavigationMonitor
    from modules.monitoring.health import RouteHealthMonitor
    from modules.monitoring.tracker import NavigationTracker

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the
    lifetime of the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._route_table: "RouteTable | None" = None
        self._policy: "AccessPolicy | None" = None
        self._identity: "ContextIdentityProvider | None" = None
        self._guard: "RouteGuard | None" = None
        self._page_registry: "IPageRegistry | None" = None
        self._probe: "ComponentProbe | None" = None
        self._navigation: "NavigationMonitor | None" = None
        self._health: "RouteHealthMonitor | None" = None
        self._tracker: "NavigationTracker | None" = None

    @property
    def route_table(self) -> "RouteTable":
        """Get the frozen route table."""
        if self._route_table is None:
            from modules.routing.catalog import build_route_table
            self._route_table = build_route_table(get_settings())
            logger.info(f"Route table ready with {len(self._route_table)} routes")
        return self._route_table

    @property
    def policy(self) -> "AccessPolicy":
        """Get the access policy evaluator."""
        if self._policy is None:
            from modules.routing.policy import AccessPolicy
            self._policy = AccessPolicy(self.route_table)
            for conflict in self._policy.prefix_conflicts():
                logger.warning(
                    f"Route {conflict.path_pattern!r} allows {conflict.allowed_roles} "
                    f"but its prefix guard requires {conflict.prefix_role.value}"
                )
        return self._policy

    @property
    def identity(self) -> "ContextIdentityProvider":
        """Get the request-scoped identity provider."""
        if self._identity is None:
            from modules.routing.identity import ContextIdentityProvider
            self._identity = ContextIdentityProvider()
        return self._identity

    @property
    def guard(self) -> "RouteGuard":
        """Get the render-time route guard."""
        if self._guard is None:
            from modules.routing.guard import RouteGuard
            self._guard = RouteGuard(self.policy, self.identity)
        return self._guard

    @property
    def page_registry(self) -> "IPageRegistry":
        """
        Get the page-rendering collaborator.

        Probes a pages package when ``pages_package`` is configured,
        otherwise assumes one page per registered route.
        """
        if self._page_registry is None:
            from modules.monitoring.probe import ModulePageRegistry, StaticPageRegistry
            settings = get_settings()
            if settings.pages_package:
                self._page_registry = ModulePageRegistry(settings.pages_package)
            else:
                self._page_registry = StaticPageRegistry.for_paths(
                    self.route_table.patterns()
                )
        return self._page_registry

    @property
    def probe(self) -> "ComponentProbe":
        """Get the page implementation probe."""
        if self._probe is None:
            from modules.monitoring.probe import ComponentProbe
            self._probe = ComponentProbe(
                self.page_registry,
                timeout=get_settings().component_probe_timeout,
            )
        return self._probe

    @property
    def navigation(self) -> "NavigationMonitor":
        """Get the navigation monitor."""
        if self._navigation is None:
            from modules.monitoring.navigation import NavigationMonitor
            self._navigation = NavigationMonitor(
                self.route_table,
                max_events=get_settings().max_navigation_events,
            )
        return self._navigation

    @property
    def health(self) -> "RouteHealthMonitor":
        """Get the route health monitor."""
        if self._health is None:
            from modules.monitoring.health import RouteHealthMonitor
            self._health = RouteHealthMonitor(self.policy, self.identity, self.probe)
        return self._health

    @property
    def tracker(self) -> "NavigationTracker":
        """Get the layout-level navigation tracker."""
        if self._tracker is None:
            from modules.monitoring.tracker import NavigationTracker
            self._tracker = NavigationTracker(self.navigation, self.health, self.identity)
        return self._tracker

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different settings.
        """
        self._route_table = None
        self._policy = None
        self._identity = None
        self._guard = None
        self._page_registry = None
        self._probe = None
        self._navigation = None
        self._health = None
        self._tracker = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_route_table() -> "RouteTable":
    """FastAPI dependency for the route table."""
    return get_container().route_table


def get_identity_provider() -> "ContextIdentityProvider":
    """FastAPI dependency for the identity provider."""
    return get_container().identity


def get_route_guard() -> "RouteGuard":
    """FastAPI dependency for the route guard."""
    return get_container().guard


def get_navigation_monitor() -> "NavigationMonitor":
    """FastAPI dependency for the navigation monitor."""
    return get_container().navigation


def get_health_monitor() -> "RouteHealthMonitor":
    """FastAPI dependency for the route health monitor."""
    return get_container().health


def get_navigation_tracker() -> "NavigationTracker":
    """FastAPI dependency for the navigation tracker."""
    return get_container().tracker
