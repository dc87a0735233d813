"""Service layer for stored groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from barnehage.store import find_by_id, normalize_group

from .utils import normalize_group_label

if TYPE_CHECKING:
    from barnehage.store import JsonStore

    from .models import Group


class GroupService:
    """Service class for group-related operations."""

    @staticmethod
    def get_groups(store: JsonStore) -> list[Group]:
        """Return the stored groups."""
        return store.read()["groups"]

    @staticmethod
    def update_group(
        store: JsonStore, group_id: Any, updates: dict[str, Any]
    ) -> Optional[Group]:
        """Apply a partial update to a group, or return None if it does not exist."""
        payload = {
            key: updates[key]
            for key in ("name", "totalCapacity", "currentCount")
            if updates.get(key) is not None
        }
        if "name" in payload:
            payload["name"] = normalize_group_label(payload["name"])

        with store.transaction() as db:
            group = find_by_id(db["groups"], group_id)
            if group is None:
                return None
            index = db["groups"].index(group)
            db["groups"][index] = normalize_group({**group, **payload})
            return db["groups"][index]
