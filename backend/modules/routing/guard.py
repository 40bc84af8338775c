"""
Render-time route guard.

Given the requested path and the current identity, decides whether the
view renders, redirects, or shows a loading indicator while the identity
is still being resolved.
"""

import logging

from .interfaces import IIdentityProvider
from .models import GuardAction, GuardDecision
from .policy import AccessPolicy, home_dashboard, login_target, prefix_role

logger = logging.getLogger(__name__)


class RouteGuard:
    """Decides render-vs-redirect for guarded views."""

    def __init__(self, policy: AccessPolicy, identity_provider: IIdentityProvider):
        self._policy = policy
        self._identity = identity_provider

    def resolve(self, path: str) -> GuardDecision:
        """
        Resolve the guard decision for a path.

        The route table policy is applied first. If it allows the path, the
        prefix guards are applied as a second layer to protected routes.
        """
        identity = self._identity.current()
        if identity is None:
            return GuardDecision(action=GuardAction.LOADING, path=path)

        target = self._policy.redirect_for(path, identity)
        if target != path:
            result = self._policy.validate(path, identity)
            reason = result.error.value if result.error else "Already signed in"
            return GuardDecision(
                action=GuardAction.REDIRECT,
                path=path,
                target=target,
                reason=reason,
            )

        spec = self._policy.table.find(path)
        required = prefix_role(path)
        if spec is not None and spec.auth_required and required is not None:
            if identity.effective_role != required:
                logger.warning(
                    f"Prefix guard rejected {path!r} for role {identity.role}; "
                    f"route table allowed it"
                )
                target = (
                    home_dashboard(identity.role)
                    if identity.authenticated
                    else login_target(path)
                )
                return GuardDecision(
                    action=GuardAction.REDIRECT,
                    path=path,
                    target=target,
                    reason=f"Requires {required.value} role",
                )

        return GuardDecision(action=GuardAction.RENDER, path=path)
