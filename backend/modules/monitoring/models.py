"""
Monitoring module data models.

These models define navigation events, route checks and the reports
derived from them. Reports are computed on demand and never stored.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

INVALID_ROUTE = "Invalid route"
INVALID_BREADCRUMB = "Invalid breadcrumb path"
INVALID_ROUTE_OR_COMPONENT = "Invalid route or missing component"


class NavigationEvent(BaseModel):
    """
    One attempt to move from one path to another.

    Once recorded by the navigation monitor, ``success`` and ``error``
    hold the validated outcome rather than the caller's claim.
    """

    from_path: str = Field(default="", alias="from", description="Path navigated away from")
    to: str = Field(..., description="Destination path")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the navigation was committed",
    )
    user_id: Optional[str] = Field(None, description="Navigating user, if signed in")
    success: bool = Field(default=True, description="Whether the navigation succeeded")
    error: Optional[str] = Field(None, description="Failure reason")

    model_config = {"frozen": True, "populate_by_name": True}


class NavigationSummary(BaseModel):
    """Totals over the navigation history."""

    total: int
    success: int
    failed: int
    success_rate: float = Field(..., description="Percentage, 100 when history is empty")


class RouteAnalysis(BaseModel):
    """Destinations grouped by structural problem, newest first, de-duplicated."""

    invalid_routes: list[str] = Field(default_factory=list)
    broken_breadcrumbs: list[str] = Field(default_factory=list)
    orphaned_pages: list[str] = Field(default_factory=list)


class NavigationReport(BaseModel):
    """Navigation monitor report."""

    summary: NavigationSummary
    recent_failures: list[NavigationEvent] = Field(default_factory=list)
    route_analysis: RouteAnalysis
    timestamp: datetime


class ComponentStatus(str, Enum):
    """Outcome of probing the page-rendering layer for an implementation."""

    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"


class RouteCheck(BaseModel):
    """
    Latest structural and accessibility audit of one path.

    Carries no timestamp: checking the same path twice with the same
    identity and route table yields equal checks.
    """

    path: str
    exists: bool
    has_component: ComponentStatus
    is_accessible: bool
    breadcrumb_valid: bool
    parent_route: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def valid(self) -> bool:
        """False if any predicate definitely failed; UNKNOWN components pass."""
        return (
            self.exists
            and self.has_component != ComponentStatus.ABSENT
            and self.is_accessible
            and self.breadcrumb_valid
        )


class RouteIssues(BaseModel):
    """Per-route breakdown of failed predicates."""

    missing_route: bool = False
    missing_component: bool = False
    pending_component: bool = False
    inaccessible: bool = False
    invalid_breadcrumb: bool = False
    orphaned: bool = False


class RouteHealthDetail(BaseModel):
    path: str
    issues: RouteIssues


class HealthIssueCounts(BaseModel):
    """Number of cached routes failing each predicate."""

    missing_routes: int = 0
    missing_components: int = 0
    pending_components: int = 0
    inaccessible: int = 0
    invalid_breadcrumbs: int = 0
    orphaned_pages: int = 0


class RouteHealthReport(BaseModel):
    """Route health monitor report over every cached check."""

    timestamp: datetime
    total_routes: int
    valid_routes: int
    invalid_routes: int
    issues: HealthIssueCounts
    details: list[RouteHealthDetail] = Field(default_factory=list)
