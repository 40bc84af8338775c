"""
Monitoring module interfaces.

The route health monitor asks the page-rendering layer whether a page
implementation exists. That lookup may be slow, so it is async.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPageRegistry(Protocol):
    """
    Interface for the page-rendering collaborator.

    Implementations answer whether a page implementation is registered
    for a route pattern.
    """

    async def has_page(self, path: str) -> bool:
        """
        Check whether a page implementation exists for a route.

        Args:
            path: Route pattern (e.g. "/admin/crm/leads")

        Returns:
            True if the page is implemented

        Raises:
            Any lookup error; callers degrade it to a failed probe
        """
        ...
