"""
Layout-level navigation hook.

Called once per committed navigation: records the attempt, re-checks the
destination and records a synthesized failure if the check finds the
route missing, unimplemented or inaccessible.
"""

import logging

from modules.routing.interfaces import IIdentityProvider

from .health import RouteHealthMonitor
from .models import INVALID_ROUTE_OR_COMPONENT, ComponentStatus, NavigationEvent, RouteCheck
from .navigation import NavigationMonitor

logger = logging.getLogger(__name__)


class NavigationTracker:
    """Feeds committed navigations to both monitors."""

    def __init__(
        self,
        navigation: NavigationMonitor,
        health: RouteHealthMonitor,
        identity_provider: IIdentityProvider,
    ):
        self._navigation = navigation
        self._health = health
        self._identity = identity_provider

    async def on_navigate(self, to: str, from_path: str = "") -> RouteCheck:
        """
        Record a committed navigation.

        Args:
            to: Destination path
            from_path: Path navigated away from ("" on first load)

        Returns:
            The destination's route check
        """
        identity = self._identity.current()
        user_id = identity.user_id if identity else None

        self._navigation.log(
            NavigationEvent(from_path=from_path, to=to, user_id=user_id, success=True)
        )

        route_check = await self._health.check(to)
        if (
            not route_check.exists
            or route_check.has_component == ComponentStatus.ABSENT
            or not route_check.is_accessible
        ):
            logger.warning(f"Navigation to {to!r} failed its route check")
            self._navigation.log(
                NavigationEvent(
                    from_path=from_path,
                    to=to,
                    user_id=user_id,
                    success=False,
                    error=INVALID_ROUTE_OR_COMPONENT,
                )
            )
        return route_check
