"""
Pytest fixtures for monitoring module tests.

Provides page registries standing in for the page-rendering layer.
"""

import asyncio

import pytest

from modules.monitoring.health import RouteHealthMonitor
from modules.monitoring.navigation import NavigationMonitor
from modules.monitoring.probe import ComponentProbe, StaticPageRegistry
from modules.monitoring.tracker import NavigationTracker


class SlowPageRegistry:
    """Registry that never answers within a short timeout."""

    async def has_page(self, path: str) -> bool:
        await asyncio.sleep(5)
        return True


class FailingPageRegistry:
    """Registry whose lookup always fails."""

    async def has_page(self, path: str) -> bool:
        raise RuntimeError("page index unavailable")


@pytest.fixture
def page_registry(route_table) -> StaticPageRegistry:
    """One page per registered route."""
    return StaticPageRegistry.for_paths(route_table.patterns())


@pytest.fixture
def probe(page_registry) -> ComponentProbe:
    return ComponentProbe(page_registry, timeout=0.5)


@pytest.fixture
def navigation_monitor(route_table) -> NavigationMonitor:
    return NavigationMonitor(route_table)


@pytest.fixture
def health_monitor(policy, identity_provider, probe) -> RouteHealthMonitor:
    return RouteHealthMonitor(policy, identity_provider, probe)


@pytest.fixture
def tracker(navigation_monitor, health_monitor, identity_provider) -> NavigationTracker:
    return NavigationTracker(navigation_monitor, health_monitor, identity_provider)


@pytest.fixture
def slow_registry() -> SlowPageRegistry:
    return SlowPageRegistry()


@pytest.fixture
def failing_registry() -> FailingPageRegistry:
    return FailingPageRegistry()
