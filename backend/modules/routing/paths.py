"""
Parent and breadcrumb derivation over path strings.

All functions are pure. Segments are the non-empty parts between slashes,
so ``/admin/users/`` and ``/admin/users`` have the same parent.
"""

from collections.abc import Container


def segments(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    return [part for part in path.split("/") if part]


def depth(path: str) -> int:
    return len(segments(path))


def parent_of(path: str) -> str:
    """
    Drop the last segment of a path.

    Returns "/" for top-level paths and for "/" itself.
    """
    parts = segments(path)
    if len(parts) <= 1:
        return "/"
    return "/" + "/".join(parts[:-1])


def breadcrumb_trail(path: str) -> list[str]:
    """
    Every ancestor prefix of a path, shortest first, ending with the path.

    ``/admin/crm/leads`` -> ``["/admin", "/admin/crm", "/admin/crm/leads"]``
    """
    parts = segments(path)
    return ["/" + "/".join(parts[: index + 1]) for index in range(len(parts))]


def breadcrumb_valid(path: str, registered: Container[str]) -> bool:
    """
    Check that every breadcrumb level of a path is a registered route.

    Membership is exact: a prefix must itself be a key in the route table,
    parameter patterns do not count. "/" has no levels and is always valid.
    """
    return all(prefix in registered for prefix in breadcrumb_trail(path))
