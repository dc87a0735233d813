"""Tests for the filtering and sorting helpers."""

from __future__ import annotations

import unittest

from barnehage import filters

ACTIVITIES = [
    {"id": 1, "group": "Blå", "createdAt": "2025-12-11T10:00:00.000Z"},
    {"id": 2, "group": "red", "createdAt": "2025-12-12T09:30:00.000Z"},
    {"id": 3, "group": "Gul gruppe", "createdAt": "2025-12-12T11:00:00.000Z"},
    {"id": 4, "group": "BLÅ GRUPPE", "createdAt": "2025-12-12T08:00:00.000Z"},
    {"id": 5, "group": "bla", "createdAt": "not a date"},
]


def _ids(items):
    return [item["id"] for item in items]


class ActivityFilterTestCase(unittest.TestCase):
    """Test case for activity filtering."""

    def test_filter_by_group(self) -> None:
        self.assertEqual(_ids(filters.filter_activities(ACTIVITIES, "blå")), [1, 4, 5])
        self.assertEqual(
            _ids(filters.filter_activities(ACTIVITIES, "Rød gruppe")), [2]
        )
        self.assertEqual(_ids(filters.filter_activities(ACTIVITIES, "gul")), [])
        self.assertEqual(_ids(filters.filter_activities(ACTIVITIES, "Gul gruppe")), [3])

    def test_filter_by_date(self) -> None:
        self.assertEqual(
            _ids(filters.filter_activities(ACTIVITIES, date="2025-12-12")), [2, 3, 4]
        )
        self.assertEqual(
            _ids(filters.filter_activities(ACTIVITIES, "bla", "2025-12-12")), [4]
        )

    def test_no_filters(self) -> None:
        self.assertEqual(_ids(filters.filter_activities(ACTIVITIES)), [1, 2, 3, 4, 5])

    def test_available_dates(self) -> None:
        self.assertEqual(
            filters.get_available_dates(ACTIVITIES), ["2025-12-12", "2025-12-11"]
        )
        self.assertEqual(
            filters.get_available_dates_for_group(ACTIVITIES, "rod"), ["2025-12-12"]
        )

    def test_activity_groups(self) -> None:
        self.assertEqual(
            filters.get_activity_groups(ACTIVITIES[:3] + ACTIVITIES[:1]),
            ["Blå", "red", "Gul gruppe"],
        )

    def test_sort_by_date(self) -> None:
        self.assertEqual(
            _ids(filters.sort_activities_by_date_descending(ACTIVITIES)),
            [3, 2, 4, 1, 5],
        )


class ChildFilterTestCase(unittest.TestCase):
    """Test case for child filtering and sorting."""

    def setUp(self) -> None:
        self.children = [
            {"id": 1, "name": "Øyvind", "group": "Rød gruppe"},
            {"id": 2, "name": "Anne", "group": "Blå gruppe"},
            {"id": 3, "name": "Åse", "group": "blĺ"},
            {"id": 4, "name": "Zara", "group": "RED"},
            {"id": 5, "name": "Ærlig", "group": "Blå gruppe"},
            {"id": 6, "name": "émile", "group": "Blå gruppe"},
        ]

    def test_filter_by_group(self) -> None:
        self.assertEqual(
            _ids(filters.filter_children_by_group(self.children, "Blå")), [2, 3, 5, 6]
        )
        self.assertEqual(
            _ids(filters.filter_children_by_group(self.children, "rød")), [1, 4]
        )

    def test_child_groups(self) -> None:
        self.assertEqual(
            filters.get_child_groups(self.children),
            ["Rød gruppe", "Blå gruppe", "blĺ", "RED"],
        )

    def test_norwegian_alphabetical_order(self) -> None:
        self.assertEqual(
            _ids(filters.sort_children_alphabetically(self.children)),
            [2, 6, 4, 5, 1, 3],
        )


if __name__ == "__main__":
    unittest.main()
