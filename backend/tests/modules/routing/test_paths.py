"""Tests for parent and breadcrumb derivation."""

import pytest

from modules.routing.catalog import DEFAULT_ROUTES
from modules.routing.paths import (
    breadcrumb_trail,
    breadcrumb_valid,
    depth,
    parent_of,
    segments,
)


class TestSegments:
    def test_ignores_empty_parts(self):
        """Leading, trailing and doubled slashes should not create segments."""
        assert segments("/admin//crm/leads/") == ["admin", "crm", "leads"]

    def test_root_has_no_segments(self):
        assert segments("/") == []
        assert depth("/") == 0


class TestParentOf:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/", "/"),
            ("/about", "/"),
            ("/admin/users", "/admin"),
            ("/admin/crm/leads", "/admin/crm"),
            ("/customer-dashboard/bookings/", "/customer-dashboard"),
        ],
    )
    def test_parent_of(self, path, expected):
        """parent_of should drop the last segment."""
        assert parent_of(path) == expected


class TestBreadcrumbs:
    def test_trail(self):
        """Trail should list every prefix, shortest first."""
        assert breadcrumb_trail("/admin/crm/leads") == [
            "/admin",
            "/admin/crm",
            "/admin/crm/leads",
        ]

    def test_valid_when_every_level_registered(self, route_table):
        assert breadcrumb_valid("/customer-dashboard/bookings", route_table) is True

    def test_invalid_when_a_level_is_missing(self, route_table):
        """/admin itself is not a registered route."""
        assert breadcrumb_valid("/admin/users", route_table) is False
        assert breadcrumb_valid("/pro/earnings", route_table) is False

    def test_root_is_valid(self, route_table):
        assert breadcrumb_valid("/", route_table) is True

    def test_parameter_patterns_do_not_count(self):
        """Breadcrumb levels need exact registration, not a pattern match."""
        registered = {"/bookings", "/bookings/:id"}
        assert breadcrumb_valid("/bookings/:id", registered) is True
        assert breadcrumb_valid("/bookings/42", registered) is False

    def test_monotone_across_ancestors(self, route_table):
        """A valid breadcrumb implies a valid breadcrumb for the parent."""
        paths = [spec.path_pattern for spec in DEFAULT_ROUTES] + [
            "/customer-dashboard/bookings/42",
            "/admin/crm/leads/7",
            "/unknown/deeper/path",
        ]
        for path in paths:
            if depth(path) > 1 and breadcrumb_valid(path, route_table):
                assert breadcrumb_valid(parent_of(path), route_table), path
