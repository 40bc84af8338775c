"""
Route health monitor.

Audits paths for structural integrity: the route exists, a page
implements it, the current identity can reach it, and every breadcrumb
level is registered. Results are cached per path, latest wins.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from modules.routing.interfaces import IIdentityProvider
from modules.routing.paths import breadcrumb_valid, parent_of
from modules.routing.policy import AccessPolicy
from shared.models import Identity

from .models import (
    ComponentStatus,
    HealthIssueCounts,
    RouteCheck,
    RouteHealthDetail,
    RouteHealthReport,
    RouteIssues,
)
from .probe import ComponentProbe

logger = logging.getLogger(__name__)


class RouteHealthMonitor:
    """
    Per-path route audit cache.

    Reads the identity from the same provider as the route guard, so
    accessibility always reflects the session the guard sees.
    """

    def __init__(
        self,
        policy: AccessPolicy,
        identity_provider: IIdentityProvider,
        probe: ComponentProbe,
    ):
        self._policy = policy
        self._identity = identity_provider
        self._probe = probe
        self._checks: dict[str, RouteCheck] = {}
        self._lock = threading.Lock()

    def _current_identity(self) -> Identity:
        # An unresolved identity cannot reach guarded pages yet
        return self._identity.current() or Identity.anonymous()

    async def check(self, path: str) -> RouteCheck:
        """
        Audit a path and cache the result.

        The page probe is awaited; a slow page-rendering layer yields
        ``ComponentStatus.UNKNOWN`` instead of blocking.
        """
        table = self._policy.table
        spec = table.find(path)
        identity = self._current_identity()

        # Parametric paths are implemented by their pattern's page
        has_component = await self._probe.probe(spec.path_pattern if spec else path)

        route_check = RouteCheck(
            path=path,
            exists=spec is not None,
            has_component=has_component,
            is_accessible=self._policy.is_accessible(path, identity),
            breadcrumb_valid=breadcrumb_valid(path, table),
            parent_route=parent_of(path),
        )

        with self._lock:
            self._checks[path] = route_check

        if not route_check.valid:
            logger.debug(f"Route check failed for {path!r}: {route_check}")
        return route_check

    async def audit_all(self) -> list[RouteCheck]:
        """
        Check every registered literal route.

        Parameter patterns are skipped since they are not navigable as-is.
        """
        results = []
        for pattern in self._policy.table.patterns():
            if ":" in pattern:
                continue
            results.append(await self.check(pattern))
        logger.info(
            f"Audited {len(results)} routes, "
            f"{sum(1 for r in results if not r.valid)} invalid"
        )
        return results

    def status(self, path: str) -> Optional[RouteCheck]:
        """Latest cached check for a path."""
        with self._lock:
            return self._checks.get(path)

    def checks(self) -> list[RouteCheck]:
        """All cached checks."""
        with self._lock:
            return list(self._checks.values())

    def invalid_routes(self) -> list[RouteCheck]:
        """Cached checks where any predicate definitely failed."""
        return [check for check in self.checks() if not check.valid]

    def _issues(self, check: RouteCheck) -> RouteIssues:
        parent = check.parent_route or parent_of(check.path)
        return RouteIssues(
            missing_route=not check.exists,
            missing_component=check.has_component == ComponentStatus.ABSENT,
            pending_component=check.has_component == ComponentStatus.UNKNOWN,
            inaccessible=not check.is_accessible,
            invalid_breadcrumb=not check.breadcrumb_valid,
            orphaned=self._policy.table.find(parent) is None,
        )

    def report(self) -> RouteHealthReport:
        """Summarize every cached check."""
        checks = self.checks()
        counts = HealthIssueCounts()
        details = []

        for check in checks:
            issues = self._issues(check)
            counts.missing_routes += issues.missing_route
            counts.missing_components += issues.missing_component
            counts.pending_components += issues.pending_component
            counts.inaccessible += issues.inaccessible
            counts.invalid_breadcrumbs += issues.invalid_breadcrumb
            counts.orphaned_pages += issues.orphaned
            if any(issues.model_dump().values()):
                details.append(RouteHealthDetail(path=check.path, issues=issues))

        invalid = sum(1 for check in checks if not check.valid)
        return RouteHealthReport(
            timestamp=datetime.now(timezone.utc),
            total_routes=len(checks),
            valid_routes=len(checks) - invalid,
            invalid_routes=invalid,
            issues=counts,
            details=details,
        )

    def clear(self) -> None:
        """Drop every cached check."""
        with self._lock:
            self._checks.clear()
