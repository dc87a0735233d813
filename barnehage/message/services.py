"""Service layer for parent-staff messaging."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, Optional

from flask import current_app

from barnehage.dates import now_iso, parse_iso
from barnehage.errors import ValidationError
from barnehage.store import find_by_id, next_id, normalize_message
from barnehage.utils import parse_int

if TYPE_CHECKING:
    from barnehage.store import JsonStore

    from .models import Message


class MessageService:
    """Service class for message-related operations."""

    @staticmethod
    def get_messages(store: JsonStore, parent_id: Any = None) -> list[Message]:
        """Return messages oldest first, optionally for one parent."""
        messages = store.read()["messages"]
        if parent_id is not None:
            wanted = parse_int(parent_id)
            messages = [m for m in messages if m["parentId"] == wanted]
        oldest = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)
        return sorted(messages, key=lambda m: parse_iso(m["createdAt"]) or oldest)

    @staticmethod
    def add_message(store: JsonStore, data: dict[str, Any]) -> Message:
        """Send a message in a parent's thread.

        Raises:
            ValidationError: If the parent does not exist or the message is empty.
        """
        with store.transaction() as db:
            parent = find_by_id(db["parents"], data.get("parentId"))
            if parent is None:
                raise ValidationError("Parent not found")
            content = str(data.get("content") or "").strip()
            if not content:
                raise ValidationError("Message content is required")

            message = normalize_message(
                {
                    "id": next_id(db["messages"]),
                    "parentId": parent["id"],
                    "sender": data.get("sender"),
                    "content": content,
                    "createdAt": now_iso(),
                    "read": False,
                }
            )
            db["messages"].append(message)
        current_app.logger.info(
            f"Message {message['id']} from {message['sender']} to parent {parent['id']}"
        )
        return message

    @staticmethod
    def mark_read(store: JsonStore, message_id: Any) -> Optional[Message]:
        """Mark a message as read, or return None if it does not exist."""
        with store.transaction() as db:
            message = find_by_id(db["messages"], message_id)
            if message is None:
                return None
            message["read"] = True
            return normalize_message(message)
