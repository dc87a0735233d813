"""Shared test data and the base test case for API tests."""

from __future__ import annotations

import json
import os
import tempfile
import unittest
from typing import Any

from barnehage import create_app


def sample_database() -> dict[str, Any]:
    """Return a small raw database with legacy spellings mixed in."""
    return {
        "children": [
            {
                "id": 1,
                "name": "Ola",
                "age": 4,
                "group": "blĺ",
                "status": "checked_in",
                "parentId": 1,
                "allergies": ["nøtter"],
                "checkedInAt": "2025-12-12T07:45:00.000Z",
                "checkedOutAt": None,
                "pickupAuthorizations": [
                    {
                        "id": 1765400000000,
                        "name": "Mormor",
                        "relation": "Besteforelder",
                        "phone": "12345678",
                        "validDate": "2025-12-12",
                        "createdByParentId": "1",
                    },
                    "not an authorization",
                ],
            },
            {
                "id": 2,
                "name": "Kari",
                "age": 5,
                "group": "RØD",
                "status": "checked_out",
                "parentId": 1,
            },
            {
                "id": 3,
                "name": "",
                "age": "fem",
                "group": "Rød gruppe",
                "status": "sick",
                "parentId": 2,
            },
        ],
        "parents": [
            {
                "id": 1,
                "name": "Per Hansen",
                "email": "per@example.com",
                "phone": "+47 912 34 567",
                "childrenIds": [1, 2],
            },
            {
                "id": 2,
                "name": "Lise Berg",
                "email": "lise@example.com",
                "phone": "98765432",
                "address": "Storgata 1",
                "verified": True,
                "childrenIds": [3],
            },
        ],
        "activities": [
            {
                "id": 1,
                "title": "Tur i skogen",
                "description": "Vi gikk tur.",
                "group": "Blå",
                "createdAt": "2025-12-11T10:00:00.000Z",
            },
            {
                "id": 2,
                "title": "Maling",
                "description": "Vi malte.",
                "group": "red",
                "createdAt": "2025-12-12T09:30:00.000Z",
            },
            {
                "id": 3,
                "title": "Sangstund",
                "description": "Vi sang.",
                "group": "Gul gruppe",
                "createdAt": "2025-12-12T11:00:00.000Z",
            },
        ],
        "groups": [
            {"id": 1, "name": "bla", "totalCapacity": 12, "currentCount": 0},
            {"id": 2, "name": "Rřd", "totalCapacity": 10},
        ],
        "messages": [
            {
                "id": 1,
                "parentId": "1",
                "sender": "staff",
                "content": " Husk matpakke ",
                "createdAt": "2025-12-12T08:00:00.000Z",
            },
            {
                "id": 2,
                "parentId": 2,
                "sender": "someone",
                "content": "Hei!",
                "createdAt": "2025-12-11T08:00:00.000Z",
                "read": 1,
            },
        ],
    }


class BaseTestCase(unittest.TestCase):
    """Runs each test against a fresh copy of the sample database."""

    def setUp(self):
        """Set up the app, a test client and the seeded database."""
        tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(tmp_dir.cleanup)
        self.db_path = os.path.join(tmp_dir.name, "database.json")
        self.write_database(sample_database())

        self.app = create_app({"TESTING": True, "DATABASE_PATH": self.db_path})
        self.client = self.app.test_client()

    def write_database(self, data: dict[str, Any]) -> None:
        """Replace the database file with raw data."""
        with open(self.db_path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def read_database(self) -> dict[str, Any]:
        """Return the raw contents of the database file."""
        with open(self.db_path, encoding="utf-8") as f:
            return json.load(f)
