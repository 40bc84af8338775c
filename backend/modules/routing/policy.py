"""
Access policy evaluation.

Decides whether a path is permitted for an identity and where to send the
caller otherwise. Two layers exist:

- ``validate``/``redirect_for`` evaluate the route table's RouteSpec.
- The prefix guards (``PREFIX_GUARDS``) are a coarser check by path prefix,
  applied by the route guard and the route health monitor.

Both layers are kept. ``prefix_conflicts`` reports routes where they
disagree so the table can be fixed at bootstrap.
"""

from typing import Optional, assert_never

from shared.models import Identity, Role

from .models import PrefixConflict, RouteError, ValidationResult
from .table import RouteTable

# Pages a signed-in user is bounced away from
AUTH_ONLY_PATHS = frozenset({"/login", "/register", "/forgot-password"})

NOT_FOUND_PATH = "/404"

PREFIX_GUARDS: tuple[tuple[str, Role], ...] = (
    ("/admin", Role.ADMIN),
    ("/pro-dashboard", Role.PROVIDER),
    ("/customer-dashboard", Role.CUSTOMER),
)


def home_dashboard(role: Optional[Role]) -> str:
    """Landing page for a role ("/" when there is none)."""
    if role is None:
        return "/"
    match role:
        case Role.ADMIN:
            return "/admin/dashboard"
        case Role.PROVIDER:
            return "/pro-dashboard"
        case Role.CUSTOMER:
            return "/customer-dashboard"
        case _:
            assert_never(role)


def login_target(path: str) -> str:
    """Login page for an unauthenticated request to ``path``."""
    if path.startswith("/admin"):
        return "/admin/login"
    if path.startswith("/pro"):
        return "/pro-signup"
    return "/login"


def prefix_role(path: str) -> Optional[Role]:
    """Role required by the prefix guards for a path, if any."""
    for prefix, role in PREFIX_GUARDS:
        if path == prefix or path.startswith(prefix + "/"):
            return role
    return None


class AccessPolicy:
    """
    Access policy evaluator over a route table.

    Stateless apart from the table it reads.
    """

    def __init__(self, table: RouteTable):
        self._table = table

    @property
    def table(self) -> RouteTable:
        return self._table

    def validate(self, path: str, identity: Identity) -> ValidationResult:
        """
        Validate a path for an identity.

        Checks, in order: the route exists, authentication if required,
        role if the route restricts roles.
        """
        spec = self._table.find(path)
        if spec is None:
            return ValidationResult(valid=False, error=RouteError.ROUTE_NOT_FOUND)

        if spec.auth_required and not identity.authenticated:
            return ValidationResult(valid=False, error=RouteError.AUTHENTICATION_REQUIRED)

        if spec.allowed_roles is not None and (
            identity.role is None or identity.role not in spec.allowed_roles
        ):
            return ValidationResult(valid=False, error=RouteError.UNAUTHORIZED_ROLE)

        return ValidationResult(valid=True)

    def redirect_for(self, path: str, identity: Identity) -> str:
        """
        Where to send the caller for a requested path.

        Returns ``path`` itself when the view should render normally.
        """
        if identity.authenticated and path in AUTH_ONLY_PATHS:
            return home_dashboard(identity.role)

        result = self.validate(path, identity)
        match result.error:
            case None:
                return path
            case RouteError.AUTHENTICATION_REQUIRED:
                return login_target(path)
            case RouteError.UNAUTHORIZED_ROLE:
                return home_dashboard(identity.role)
            case RouteError.ROUTE_NOT_FOUND:
                return NOT_FOUND_PATH
            case _:
                assert_never(result.error)

    def is_accessible(self, path: str, identity: Identity) -> bool:
        """
        Coarse prefix-guard check.

        Public routes (registered with ``auth_required=False``) are always
        accessible, so ``/admin/login`` is not guarded by the ``/admin``
        prefix. Every other path under a guarded prefix needs the matching
        role on an authenticated identity.
        """
        spec = self._table.find(path)
        if spec is not None and not spec.auth_required:
            return True

        required = prefix_role(path)
        if required is None:
            return True
        return identity.effective_role == required

    def prefix_conflicts(self) -> list[PrefixConflict]:
        """Protected routes whose allowed roles disagree with their prefix guard."""
        conflicts = []
        for spec in self._table:
            required = prefix_role(spec.path_pattern)
            if required is None or not spec.auth_required:
                continue
            if spec.allowed_roles != frozenset({required}):
                conflicts.append(
                    PrefixConflict(
                        path_pattern=spec.path_pattern,
                        prefix_role=required,
                        allowed_roles=spec.allowed_roles,
                    )
                )
        return conflicts
