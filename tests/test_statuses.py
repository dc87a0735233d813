"""Tests for the child status model."""

from __future__ import annotations

import unittest

from barnehage.child.statuses import ChildStatus
from barnehage.child.utils import (
    get_all_statuses,
    get_status_color,
    get_status_description,
    get_status_label,
    is_valid_status,
    to_child_status,
)


class StatusValidationTestCase(unittest.TestCase):
    """Test case for strict status validation."""

    def test_defined_statuses_are_valid(self) -> None:
        for value in ["checked_in", "checked_out", "home"]:
            with self.subTest(value=value):
                self.assertTrue(is_valid_status(value))
                self.assertEqual(to_child_status(value), value)
                self.assertIsInstance(to_child_status(value), ChildStatus)

    def test_enum_members_are_valid(self) -> None:
        for status in ChildStatus:
            self.assertTrue(is_valid_status(status))
            self.assertIs(to_child_status(status), status)

    def test_other_values_are_rejected(self) -> None:
        invalid = [None, 123, 0, True, "invalid", "", "CHECKED_IN", " home", ["home"]]
        for value in invalid:
            with self.subTest(value=value):
                self.assertFalse(is_valid_status(value))
                self.assertIsNone(to_child_status(value))


class StatusProjectionTestCase(unittest.TestCase):
    """Test case for status labels, descriptions and colors."""

    def test_labels(self) -> None:
        self.assertEqual(get_status_label("checked_in"), "inne")
        self.assertEqual(get_status_label("checked_out"), "ute")
        self.assertEqual(get_status_label(ChildStatus.HOME), "hjemme")

    def test_unknown_label_is_none(self) -> None:
        self.assertIsNone(get_status_label("sick"))
        self.assertIsNone(get_status_label(None))

    def test_descriptions(self) -> None:
        self.assertEqual(
            get_status_description("Ola", "checked_in"),
            "Ola er for tiden i barnehagen.",
        )
        self.assertEqual(
            get_status_description("Kari", ChildStatus.CHECKED_OUT),
            "Kari er ikke sjekket inn.",
        )
        self.assertEqual(
            get_status_description("Nora", "home"), "Nora er meldt hjemme i dag."
        )

    def test_unknown_description(self) -> None:
        self.assertEqual(get_status_description("Ola", "sick"), "Ola status er ukjent.")

    def test_colors(self) -> None:
        self.assertEqual(get_status_color("checked_in"), "#DCFCE7")
        self.assertEqual(get_status_color("checked_out"), "#FEE2E2")
        self.assertEqual(get_status_color("home"), "#E5E7EB")
        self.assertEqual(get_status_color("invalid"), "#E5E7EB")

    def test_listing_is_stable(self) -> None:
        expected = [ChildStatus.CHECKED_IN, ChildStatus.CHECKED_OUT, ChildStatus.HOME]
        self.assertEqual(get_all_statuses(), expected)
        self.assertEqual(get_all_statuses(), get_all_statuses())
        statuses = get_all_statuses()
        statuses.clear()
        self.assertEqual(len(get_all_statuses()), 3)


if __name__ == "__main__":
    unittest.main()
