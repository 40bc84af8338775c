"""
Route table: the registry of navigable path patterns.

Matching a concrete path against the table:

1. An exact key match always wins.
2. Otherwise a pattern matches when both split by "/" into the same number
   of segments and every literal segment equals the path's segment.
   Parameter segments (``:id``) match anything.
3. Among several matching patterns the most specific one wins. Specificity
   compares the per-segment literal flags left to right, so the pattern
   with the longest literal prefix is chosen (``/bookings/new`` beats
   ``/bookings/:id``).

Two patterns that can match the same path with equal specificity
(``/bookings/:id`` vs ``/bookings/:slug``) are ambiguous. They are flagged
at registration and the earlier one keeps winning; a strict table rejects
them instead.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Optional

from .exceptions import RouteConflictError, RouteTableFrozenError
from .models import RouteSpec
from .paths import depth, parent_of, segments

logger = logging.getLogger(__name__)


def _split(pattern: str) -> tuple[str, ...]:
    return tuple(pattern.split("/"))


def _is_param(segment: str) -> bool:
    return segment.startswith(":")


def _specificity(parts: tuple[str, ...]) -> tuple[bool, ...]:
    return tuple(not _is_param(part) for part in parts)


def _matches(pattern_parts: tuple[str, ...], path_parts: tuple[str, ...]) -> bool:
    if len(pattern_parts) != len(path_parts):
        return False
    return all(
        _is_param(expected) or expected == actual
        for expected, actual in zip(pattern_parts, path_parts)
    )


def _overlaps(a: tuple[str, ...], b: tuple[str, ...]) -> bool:
    if len(a) != len(b):
        return False
    return all(x == y or _is_param(x) or _is_param(y) for x, y in zip(a, b))


class RouteTable:
    """
    Mapping of path pattern to RouteSpec.

    Built once at bootstrap, then frozen and only read.
    """

    def __init__(self, specs: Iterable[RouteSpec] = (), strict: bool = False):
        """
        Initialize the route table.

        Args:
            specs: Initial route specifications
            strict: Reject ambiguous patterns instead of flagging them
        """
        self._specs: dict[str, RouteSpec] = {}
        self._parts: dict[str, tuple[str, ...]] = {}
        self._conflicts: list[tuple[str, str]] = []
        self._strict = strict
        self._frozen = False
        self.register(specs)

    def register(self, specs: Iterable[RouteSpec]) -> None:
        """
        Register route specifications in bulk.

        Re-registering a pattern replaces its spec (last registration wins).
        The batch is applied atomically: a strict conflict leaves the table
        unchanged.

        Raises:
            RouteTableFrozenError: If the table has been frozen
            RouteConflictError: If strict and a pattern is ambiguous
        """
        pending_specs = dict(self._specs)
        pending_parts = dict(self._parts)
        pending_conflicts = list(self._conflicts)

        for spec in specs:
            pattern = spec.path_pattern
            if self._frozen:
                raise RouteTableFrozenError(pattern)

            parts = _split(pattern)
            if pattern not in pending_specs:
                for existing, existing_parts in pending_parts.items():
                    if not _overlaps(parts, existing_parts):
                        continue
                    if _specificity(parts) != _specificity(existing_parts):
                        continue
                    if self._strict:
                        raise RouteConflictError(pattern, existing)
                    logger.warning(
                        f"Ambiguous route pattern {pattern!r} overlaps {existing!r}; "
                        f"{existing!r} takes precedence"
                    )
                    pending_conflicts.append((existing, pattern))

            pending_specs[pattern] = spec
            pending_parts[pattern] = parts

        self._specs = pending_specs
        self._parts = pending_parts
        self._conflicts = pending_conflicts

    def freeze(self) -> None:
        """Make the table read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def strict(self) -> bool:
        return self._strict

    def find(self, path: str) -> Optional[RouteSpec]:
        """
        Find the route specification governing a concrete path.

        Returns:
            The most specific matching RouteSpec, or None
        """
        exact = self._specs.get(path)
        if exact is not None:
            return exact

        path_parts = _split(path)
        candidates = [
            pattern
            for pattern, parts in self._parts.items()
            if _matches(parts, path_parts)
        ]
        if not candidates:
            return None
        # max() keeps the first maximal element, i.e. the earliest registered
        best = max(candidates, key=lambda pattern: _specificity(self._parts[pattern]))
        return self._specs[best]

    def get(self, pattern: str) -> Optional[RouteSpec]:
        """Get the spec registered under exactly this pattern."""
        return self._specs.get(pattern)

    def patterns(self) -> list[str]:
        """All registered patterns in registration order."""
        return list(self._specs)

    def conflicts(self) -> list[tuple[str, str]]:
        """Ambiguous pattern pairs as (winning, shadowed)."""
        return list(self._conflicts)

    def children_of(self, path: str) -> list[str]:
        """Registered patterns exactly one level below a path."""
        normalized = "/" + "/".join(segments(path))
        return [
            pattern
            for pattern in self._specs
            if pattern != "/" and parent_of(pattern) == normalized
        ]

    def missing_parents(self) -> list[str]:
        """
        Registered patterns whose immediate parent is not registered.

        The table does not enforce parent registration; this audit reports
        the violations.
        """
        return [
            pattern
            for pattern in self._specs
            if depth(pattern) > 1 and parent_of(pattern) not in self._specs
        ]

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._specs

    def __iter__(self) -> Iterator[RouteSpec]:
        return iter(list(self._specs.values()))

    def __len__(self) -> int:
        return len(self._specs)
