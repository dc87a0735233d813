"""Tests for the parent blueprint."""

import unittest

from .helpers import BaseTestCase

NEW_PARENT = {
    "name": "Anna Vik",
    "email": "anna@example.com",
    "phone": "+47 400 00 000",
}


class ParentRoutesTestCase(BaseTestCase):
    """Test case for parent profiles."""

    def test_list_parents(self):
        """Test listing parents with defaults filled in."""
        parents = self.client.get("/api/parents").get_json()
        self.assertEqual([p["id"] for p in parents], [1, 2])
        self.assertEqual(parents[0]["address"], "")
        self.assertFalse(parents[0]["verified"])
        self.assertTrue(parents[1]["verified"])

    def test_create_parent(self):
        """Test creating a parent profile."""
        response = self.client.post("/api/parents", json=NEW_PARENT)
        self.assertEqual(response.status_code, 201)
        parent = response.get_json()
        self.assertEqual(parent["id"], 3)
        self.assertEqual(parent["email"], "anna@example.com")
        self.assertEqual(parent["address"], "")
        self.assertEqual(parent["childrenIds"], [])
        self.assertFalse(parent["verified"])

    def test_create_parent_invalid_email(self):
        """Test that the email address is validated."""
        response = self.client.post(
            "/api/parents", json={**NEW_PARENT, "email": "not-an-email"}
        )
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.get_json()["error"].startswith("Email:"))

    def test_create_parent_invalid_phone(self):
        """Test that the phone number is validated."""
        response = self.client.post("/api/parents", json={**NEW_PARENT, "phone": "123"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json(), {"error": "Phone: Not a valid phone number."}
        )

    def test_create_parent_invalid_children_ids(self):
        """Test that childrenIds must hold integers."""
        response = self.client.post(
            "/api/parents", json={**NEW_PARENT, "childrenIds": ["a"]}
        )
        self.assertEqual(response.status_code, 400)

    def test_update_parent(self):
        """Test a partial update of a parent."""
        response = self.client.put(
            "/api/parents/1", json={"address": "Kirkeveien 2", "verified": True}
        )
        self.assertEqual(response.status_code, 200)
        parent = response.get_json()
        self.assertEqual(parent["address"], "Kirkeveien 2")
        self.assertTrue(parent["verified"])
        self.assertEqual(parent["name"], "Per Hansen")

    def test_update_missing_parent(self):
        """Test updating a parent that does not exist."""
        response = self.client.put("/api/parents/99", json={"address": "Et sted"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {"error": "Parent not found"})

    def test_get_missing_parent(self):
        """Test fetching a parent that does not exist."""
        self.assertEqual(self.client.get("/api/parents/99").status_code, 404)

    def test_list_parent_children(self):
        """Test listing the children of a parent."""
        children = self.client.get("/api/parents/1/children").get_json()
        self.assertEqual([c["id"] for c in children], [1, 2])
        response = self.client.get("/api/parents/99/children")
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
