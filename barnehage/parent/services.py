"""Service layer for parent profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from flask import current_app

from barnehage.store import find_by_id, next_id, normalize_parent

if TYPE_CHECKING:
    from barnehage.store import JsonStore

    from .models import Parent

_UPDATABLE_FIELDS = ("name", "email", "phone", "address", "verified", "childrenIds")


class ParentService:
    """Service class for parent-related operations."""

    @staticmethod
    def get_parents(store: JsonStore) -> list[Parent]:
        """Return all parents."""
        return store.read()["parents"]

    @staticmethod
    def get_parent(store: JsonStore, parent_id: Any) -> Optional[Parent]:
        """Return one parent, or None if it does not exist."""
        return find_by_id(store.read()["parents"], parent_id)

    @staticmethod
    def create_parent(store: JsonStore, data: dict[str, Any]) -> Parent:
        """Create a parent profile."""
        with store.transaction() as db:
            parent = normalize_parent(
                {
                    "id": next_id(db["parents"]),
                    "name": data.get("name"),
                    "email": data.get("email"),
                    "phone": data.get("phone"),
                    "address": data.get("address"),
                    "verified": data.get("verified"),
                    "childrenIds": data.get("childrenIds"),
                }
            )
            db["parents"].append(parent)
        current_app.logger.info(f"Created parent {parent['id']}")
        return parent

    @staticmethod
    def update_parent(
        store: JsonStore, parent_id: Any, updates: dict[str, Any]
    ) -> Optional[Parent]:
        """Apply a partial update to a parent, or return None if it does not exist."""
        payload = {key: updates[key] for key in _UPDATABLE_FIELDS if key in updates}
        with store.transaction() as db:
            parent = find_by_id(db["parents"], parent_id)
            if parent is None:
                return None
            index = db["parents"].index(parent)
            db["parents"][index] = normalize_parent({**parent, **payload})
            return db["parents"][index]
