"""
Navigation endpoints.

The web client asks the guard before rendering a view and reports every
committed navigation. History and reports are admin-only.
"""

from fastapi import APIRouter, Depends, Query

from modules.monitoring.models import NavigationEvent, NavigationReport, RouteCheck
from modules.routing.models import GuardDecision
from ..dependencies import get_navigation_monitor, get_navigation_tracker, get_route_guard
from ..middleware.auth import RequireAdmin
from ..models.navigation import CommitNavigationRequest

router = APIRouter()


@router.get("/resolve", response_model=GuardDecision)
async def resolve_navigation(
    path: str = Query(..., description="Requested path"),
    guard=Depends(get_route_guard),
) -> GuardDecision:
    """
    Decide whether the client should render or redirect.
    """
    return guard.resolve(path)


@router.post("/commit", response_model=RouteCheck)
async def commit_navigation(
    request: CommitNavigationRequest,
    tracker=Depends(get_navigation_tracker),
) -> RouteCheck:
    """
    Record a committed navigation and return the destination's route check.
    """
    return await tracker.on_navigate(request.to, from_path=request.from_path)


@router.get("/history", response_model=list[NavigationEvent], dependencies=[RequireAdmin])
async def get_history(
    limit: int = Query(50, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    monitor=Depends(get_navigation_monitor),
) -> list[NavigationEvent]:
    """Get navigation history, newest first."""
    return list(monitor.history()[offset : offset + limit])


@router.get("/failed", response_model=list[NavigationEvent], dependencies=[RequireAdmin])
async def get_failed(monitor=Depends(get_navigation_monitor)) -> list[NavigationEvent]:
    """Get failed navigations, newest first."""
    return monitor.failed()


@router.get("/report", response_model=NavigationReport, dependencies=[RequireAdmin])
async def get_report(monitor=Depends(get_navigation_monitor)) -> NavigationReport:
    """Get the navigation report."""
    return monitor.report()


@router.delete("/history", status_code=204, dependencies=[RequireAdmin])
async def clear_history(monitor=Depends(get_navigation_monitor)) -> None:
    """Clear the navigation history."""
    monitor.clear()
