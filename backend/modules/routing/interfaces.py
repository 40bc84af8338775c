"""
Routing module interfaces.

The identity collaborator is the single source of truth for who is
navigating. Both the route guard and the route health monitor read it
through IIdentityProvider, never from a second copy.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Identity


@runtime_checkable
class IIdentityProvider(Protocol):
    """
    Interface for reading the current identity.

    Implementations wrap whatever owns the session (an in-process store,
    a per-request context, an auth client).
    """

    def current(self) -> Optional[Identity]:
        """
        Get the identity of the current caller.

        Returns:
            The resolved Identity, or None while it is still loading
        """
        ...
