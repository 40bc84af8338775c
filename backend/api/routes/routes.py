"""
Route health endpoints.

Expose the route health monitor's audit cache. Child route listing is
public since the client uses it to build navigation menus.
"""

from fastapi import APIRouter, Depends, Query

from modules.monitoring.models import RouteCheck, RouteHealthReport
from ..dependencies import get_health_monitor, get_route_table
from ..middleware.auth import RequireAdmin
from ..models.navigation import ChildRoutesResponse

router = APIRouter()


@router.post("/check", response_model=RouteCheck, dependencies=[RequireAdmin])
async def check_route(
    path: str = Query(..., description="Path to audit"),
    monitor=Depends(get_health_monitor),
) -> RouteCheck:
    """Audit a single path."""
    return await monitor.check(path)


@router.post("/audit", response_model=list[RouteCheck], dependencies=[RequireAdmin])
async def audit_routes(monitor=Depends(get_health_monitor)) -> list[RouteCheck]:
    """Audit every registered route."""
    return await monitor.audit_all()


@router.get("/invalid", response_model=list[RouteCheck], dependencies=[RequireAdmin])
async def get_invalid_routes(monitor=Depends(get_health_monitor)) -> list[RouteCheck]:
    """Get cached checks with at least one failed predicate."""
    return monitor.invalid_routes()


@router.get("/report", response_model=RouteHealthReport, dependencies=[RequireAdmin])
async def get_health_report(monitor=Depends(get_health_monitor)) -> RouteHealthReport:
    """Get the route health report."""
    return monitor.report()


@router.get("/children", response_model=ChildRoutesResponse)
async def get_child_routes(
    path: str = Query("/", description="Parent path"),
    table=Depends(get_route_table),
) -> ChildRoutesResponse:
    """List registered routes one level below a path."""
    return ChildRoutesResponse(path=path, children=table.children_of(path))
