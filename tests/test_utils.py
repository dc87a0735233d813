"""Tests for the shared text helpers."""

from __future__ import annotations

import unittest

from barnehage.utils import clean_text, is_valid_phone, parse_int, sanitize_url


class CleanTextTestCase(unittest.TestCase):
    """Test case for clean_text and sanitize_url."""

    def test_clean_text(self) -> None:
        self.assertEqual(clean_text("  <b>Hei</b> "), "bHei/b")
        self.assertEqual(clean_text(None), "")
        self.assertEqual(clean_text(""), "")
        self.assertEqual(clean_text(42), "42")

    def test_sanitize_url(self) -> None:
        self.assertEqual(sanitize_url(" https://x.no/<a> "), "https://x.no/a")
        self.assertEqual(sanitize_url(None), "")


class PhoneTestCase(unittest.TestCase):
    """Test case for is_valid_phone."""

    def test_valid_numbers(self) -> None:
        for phone in ["12345678", "+47 123 45 678", "(+47) 123-45-678"]:
            with self.subTest(phone=phone):
                self.assertTrue(is_valid_phone(phone))

    def test_invalid_numbers(self) -> None:
        for phone in ["", "1234567", "123 456 abc", None]:
            with self.subTest(phone=phone):
                self.assertFalse(is_valid_phone(phone))


class ParseIntTestCase(unittest.TestCase):
    """Test case for parse_int."""

    def test_values(self) -> None:
        self.assertEqual(parse_int(5), 5)
        self.assertEqual(parse_int("5"), 5)
        self.assertEqual(parse_int(" 12abc"), 12)
        self.assertEqual(parse_int("-3"), -3)
        self.assertEqual(parse_int(4.9), 4)

    def test_unparseable(self) -> None:
        for value in [None, "", "abc", True, float("nan"), [1]]:
            with self.subTest(value=value):
                self.assertIsNone(parse_int(value))


if __name__ == "__main__":
    unittest.main()
