"""
Navigation monitor.

Records every committed navigation, re-validating the destination against
the route table before storing it. History is bounded and newest first.
"""

import logging
import threading
from collections import deque
from datetime import datetime, timezone

from modules.routing.paths import breadcrumb_valid, parent_of
from modules.routing.table import RouteTable

from .models import (
    INVALID_BREADCRUMB,
    INVALID_ROUTE,
    NavigationEvent,
    NavigationReport,
    NavigationSummary,
    RouteAnalysis,
)

logger = logging.getLogger(__name__)

MAX_EVENTS = 1000
RECENT_FAILURES = 10


def _unique(paths: list[str]) -> list[str]:
    return list(dict.fromkeys(paths))


class NavigationMonitor:
    """
    Bounded navigation history with validation and reporting.

    Constructed once at bootstrap and shared by reference. Writers are
    serialized with a lock so the monitor can live in a threaded host.
    """

    def __init__(self, table: RouteTable, max_events: int = MAX_EVENTS):
        self._table = table
        self._max_events = max_events
        self._events: deque[NavigationEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    @property
    def max_events(self) -> int:
        return self._max_events

    def log(self, event: NavigationEvent) -> NavigationEvent:
        """
        Validate and record a navigation event.

        Returns:
            The stored event, with validated success and error
        """
        exists = self._table.find(event.to) is not None
        breadcrumb_ok = breadcrumb_valid(event.to, self._table)

        if not exists:
            error = INVALID_ROUTE
        elif not breadcrumb_ok:
            error = INVALID_BREADCRUMB
        else:
            error = event.error

        validated = event.model_copy(
            update={
                "success": event.success and exists and breadcrumb_ok,
                "error": error,
            }
        )

        with self._lock:
            # appendleft on a bounded deque drops the oldest entry
            self._events.appendleft(validated)

        if validated.success:
            logger.debug(f"Navigation {validated.from_path!r} -> {validated.to!r}")
        else:
            logger.debug(
                f"Failed navigation {validated.from_path!r} -> {validated.to!r}: "
                f"{validated.error} (parent {parent_of(validated.to)!r})"
            )
        return validated

    def history(self) -> tuple[NavigationEvent, ...]:
        """Snapshot of the history, newest first."""
        with self._lock:
            return tuple(self._events)

    def failed(self) -> list[NavigationEvent]:
        """Failed navigations, newest first."""
        return [event for event in self.history() if not event.success]

    def report(self) -> NavigationReport:
        """Summarize the current history."""
        events = self.history()
        failures = [event for event in events if not event.success]

        total = len(events)
        failed = len(failures)
        success = total - failed
        success_rate = (success / total) * 100 if total > 0 else 100.0

        analysis = RouteAnalysis(
            invalid_routes=_unique([e.to for e in events if e.error == INVALID_ROUTE]),
            broken_breadcrumbs=_unique(
                [e.to for e in events if e.error == INVALID_BREADCRUMB]
            ),
            orphaned_pages=_unique(
                [e.to for e in events if self._table.find(parent_of(e.to)) is None]
            ),
        )

        return NavigationReport(
            summary=NavigationSummary(
                total=total,
                success=success,
                failed=failed,
                success_rate=success_rate,
            ),
            recent_failures=failures[:RECENT_FAILURES],
            route_analysis=analysis,
            timestamp=datetime.now(timezone.utc),
        )

    def clear(self) -> None:
        """Empty the history."""
        with self._lock:
            self._events.clear()
