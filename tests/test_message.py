"""Tests for parent-staff messaging."""

import unittest

from .helpers import BaseTestCase


class MessageRoutesTestCase(BaseTestCase):
    """Test case for the message blueprint."""

    def test_list_messages_oldest_first(self):
        """Test that messages are listed oldest first."""
        messages = self.client.get("/api/messages").get_json()
        self.assertEqual([m["id"] for m in messages], [2, 1])

    def test_list_messages_for_parent(self):
        """Test filtering messages by parent."""
        messages = self.client.get("/api/messages?parentId=1").get_json()
        self.assertEqual([m["id"] for m in messages], [1])
        self.assertEqual(messages[0]["content"], "Husk matpakke")

    def test_send_message(self):
        """Test sending a message from a parent."""
        response = self.client.post(
            "/api/messages", json={"parentId": 2, "content": " Hei! "}
        )
        self.assertEqual(response.status_code, 201)
        message = response.get_json()
        self.assertEqual(message["id"], 3)
        self.assertEqual(message["sender"], "parent")
        self.assertEqual(message["content"], "Hei!")
        self.assertFalse(message["read"])

    def test_send_message_from_staff(self):
        """Test sending a message from staff."""
        response = self.client.post(
            "/api/messages",
            json={"parentId": 1, "content": "Takk", "sender": "staff"},
        )
        self.assertEqual(response.get_json()["sender"], "staff")

    def test_send_message_validation(self):
        """Test the message payload checks."""
        cases = [
            ({"parentId": 99, "content": "Hei"}, "Parent not found"),
            (
                {"parentId": 1, "content": "   "},
                "Message content: This field is required.",
            ),
        ]
        for payload, error in cases:
            with self.subTest(payload=payload):
                response = self.client.post("/api/messages", json=payload)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json(), {"error": error})

        response = self.client.post(
            "/api/messages", json={"parentId": 1, "content": "Hei", "sender": "x"}
        )
        self.assertEqual(response.status_code, 400)

    def test_mark_read(self):
        """Test marking a message as read."""
        response = self.client.post("/api/messages/1/read")
        self.assertTrue(response.get_json()["read"])
        self.assertTrue(self.read_database()["messages"][0]["read"])

        response = self.client.post("/api/messages/99/read")
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
