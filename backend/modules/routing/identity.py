"""
Identity providers.

Both providers satisfy IIdentityProvider. The application wires exactly
one of them into the route guard and the route health monitor.
"""

from contextvars import ContextVar, Token
from typing import Optional

from shared.models import Identity


class StaticIdentityProvider:
    """
    In-process identity store.

    Holds the identity of a single-user host (a client session, a test).
    ``None`` means the identity has not been resolved yet.
    """

    def __init__(self, identity: Optional[Identity] = None):
        self._identity = identity

    def current(self) -> Optional[Identity]:
        return self._identity

    def set(self, identity: Optional[Identity]) -> None:
        """Replace the stored identity (sign-in, sign-out, role change)."""
        self._identity = identity


_request_identity: ContextVar[Optional[Identity]] = ContextVar(
    "homemaidy_identity", default=None
)


class ContextIdentityProvider:
    """
    Per-request identity bound in a ContextVar.

    The HTTP identity middleware binds the decoded identity before the
    request is handled and resets it afterwards.
    """

    def current(self) -> Optional[Identity]:
        return _request_identity.get()

    def bind(self, identity: Identity) -> Token:
        return _request_identity.set(identity)

    def reset(self, token: Token) -> None:
        _request_identity.reset(token)
