"""Service layer for child records and attendance."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from flask import current_app

from barnehage.dates import now_iso
from barnehage.errors import ValidationError
from barnehage.filters import filter_children_by_group, sort_children_alphabetically
from barnehage.group.utils import normalize_group_label
from barnehage.store import find_by_id, next_id, normalize_child, normalize_parent
from barnehage.utils import clean_text, parse_int

from .statuses import ChildStatus

if TYPE_CHECKING:
    from barnehage.store import JsonStore

    from .models import Child

_UPDATABLE_FIELDS = (
    "name",
    "birthDate",
    "age",
    "group",
    "status",
    "checkedInAt",
    "checkedOutAt",
    "allergies",
    "consentGiven",
)


def clean_allergies(value: Any) -> list[str]:
    """Return the non-empty, cleaned allergy names of a payload value."""
    if not isinstance(value, list):
        return []
    return [allergy for allergy in (clean_text(item) for item in value) if allergy]


class ChildService:
    """Service class for child-related operations."""

    @staticmethod
    def get_children(store: JsonStore, group: Optional[str] = None) -> list[Child]:
        """Return all children, optionally only those in one group."""
        children = store.read()["children"]
        if group:
            children = filter_children_by_group(children, group)
        return sort_children_alphabetically(children)

    @staticmethod
    def get_child(store: JsonStore, child_id: Any) -> Optional[Child]:
        """Return one child, or None if it does not exist."""
        return find_by_id(store.read()["children"], child_id)

    @staticmethod
    def get_children_for_parent(store: JsonStore, parent_id: Any) -> list[Child]:
        """Return the children registered to a parent."""
        wanted = parse_int(parent_id)
        return [
            child
            for child in store.read()["children"]
            if child.get("parentId") == wanted
        ]

    @staticmethod
    def add_child(store: JsonStore, data: dict[str, Any]) -> Child:
        """Create a child and link it to its parent.

        Raises:
            ValidationError: If the parent does not exist.
        """
        with store.transaction() as db:
            parent = find_by_id(db["parents"], data.get("parentId"))
            if parent is None:
                raise ValidationError("Parent not found")

            status = data.get("status") or ChildStatus.HOME.value
            child = normalize_child(
                {
                    "id": next_id(db["children"]),
                    "name": data.get("name"),
                    "birthDate": data.get("birthDate") or "",
                    "age": data.get("age"),
                    "group": normalize_group_label(data.get("group")),
                    "allergies": clean_allergies(data.get("allergies")),
                    "status": status,
                    "checkedInAt": now_iso()
                    if status == ChildStatus.CHECKED_IN
                    else None,
                    "checkedOutAt": None,
                    "parentId": parent["id"],
                    "consentGiven": bool(data.get("consentGiven")),
                }
            )
            db["children"].append(child)

            children_ids = list(dict.fromkeys([*parent["childrenIds"], child["id"]]))
            index = db["parents"].index(parent)
            db["parents"][index] = normalize_parent(
                {**parent, "childrenIds": children_ids}
            )

        current_app.logger.info(
            f"Added child {child['id']} to parent {parent['id']} in {child['group']!r}"
        )
        return child

    @staticmethod
    def update_child(
        store: JsonStore, child_id: Any, updates: dict[str, Any]
    ) -> Optional[Child]:
        """Apply a partial update to a child, or return None if it does not exist."""
        payload = {key: updates[key] for key in _UPDATABLE_FIELDS if key in updates}
        if "group" in payload:
            payload["group"] = normalize_group_label(payload["group"])
        if "allergies" in payload:
            payload["allergies"] = clean_allergies(payload["allergies"])
        if "consentGiven" in payload:
            payload["consentGiven"] = bool(payload["consentGiven"])

        with store.transaction() as db:
            child = find_by_id(db["children"], child_id)
            if child is None:
                return None
            index = db["children"].index(child)
            db["children"][index] = normalize_child({**child, **payload})
            return db["children"][index]

    @staticmethod
    def set_status(
        store: JsonStore, child_id: Any, status: ChildStatus
    ) -> Optional[Child]:
        """Move a child to a new status, stamping check-in/out times."""
        updates: dict[str, Any] = {"status": status.value}
        if status == ChildStatus.CHECKED_IN:
            updates["checkedInAt"] = now_iso()
            updates["checkedOutAt"] = None
        elif status == ChildStatus.CHECKED_OUT:
            updates["checkedOutAt"] = now_iso()

        child = ChildService.update_child(store, child_id, updates)
        if child is not None:
            current_app.logger.info(f"Child {child['id']} is now {status.value}")
        return child

    @staticmethod
    def check_in(store: JsonStore, child_id: Any) -> Optional[Child]:
        """Check a child in."""
        return ChildService.set_status(store, child_id, ChildStatus.CHECKED_IN)

    @staticmethod
    def check_out(store: JsonStore, child_id: Any) -> Optional[Child]:
        """Check a child out."""
        return ChildService.set_status(store, child_id, ChildStatus.CHECKED_OUT)

    @staticmethod
    def mark_home(store: JsonStore, child_id: Any) -> Optional[Child]:
        """Mark a child as staying home today."""
        return ChildService.set_status(store, child_id, ChildStatus.HOME)
