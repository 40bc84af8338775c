"""
Monitoring module.

Records navigation attempts and audits routes for structural integrity.

Public API:
- NavigationMonitor: Bounded, validated navigation history and report
- RouteHealthMonitor: Latest-wins route check cache and report
- NavigationTracker: Layout hook feeding both monitors
- ComponentProbe / IPageRegistry: Awaited page implementation lookup
"""

from .interfaces import IPageRegistry
from .models import (
    NavigationEvent,
    NavigationReport,
    NavigationSummary,
    RouteAnalysis,
    ComponentStatus,
    RouteCheck,
    RouteIssues,
    RouteHealthDetail,
    HealthIssueCounts,
    RouteHealthReport,
    INVALID_ROUTE,
    INVALID_BREADCRUMB,
    INVALID_ROUTE_OR_COMPONENT,
)
from .navigation import NavigationMonitor, MAX_EVENTS
from .probe import (
    ComponentProbe,
    StaticPageRegistry,
    ModulePageRegistry,
    page_component_name,
)
from .health import RouteHealthMonitor
from .tracker import NavigationTracker

__all__ = [
    # Interface
    "IPageRegistry",
    # Models
    "NavigationEvent",
    "NavigationReport",
    "NavigationSummary",
    "RouteAnalysis",
    "ComponentStatus",
    "RouteCheck",
    "RouteIssues",
    "RouteHealthDetail",
    "HealthIssueCounts",
    "RouteHealthReport",
    "INVALID_ROUTE",
    "INVALID_BREADCRUMB",
    "INVALID_ROUTE_OR_COMPONENT",
    # Services
    "NavigationMonitor",
    "RouteHealthMonitor",
    "NavigationTracker",
    "ComponentProbe",
    "StaticPageRegistry",
    "ModulePageRegistry",
    "page_component_name",
    "MAX_EVENTS",
]
