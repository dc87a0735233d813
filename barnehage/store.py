"""JSON file persistence for the kindergarten database.

The whole database lives in one JSON document with a list per collection.
Every record is normalized on the way in and out, so legacy spellings of
group names and broken statuses never reach the API.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Optional

from flask import current_app

from barnehage.core.constants import (
    COLLECTIONS,
    DB_FILENAME,
    SENDER_PARENT,
    SENDER_STAFF,
    UNKNOWN_CHILD_NAME,
)
from barnehage.dates import now_iso
from barnehage.utils import parse_int

if TYPE_CHECKING:
    from flask import Flask

    from barnehage.activity.models import Activity
    from barnehage.child.models import Child
    from barnehage.group.models import Group
    from barnehage.message.models import Message
    from barnehage.parent.models import Parent

logger = logging.getLogger(__name__)

Database = dict[str, list[Any]]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_status(value: Any) -> str:
    """Return a stored status, falling back to "home" for bad values."""
    from barnehage.child.statuses import ChildStatus  # noqa: PLC0415
    from barnehage.child.utils import to_child_status  # noqa: PLC0415

    status = to_child_status(value)
    if status is None:
        if value not in (None, ""):
            logger.warning("Replacing invalid child status %r with 'home'", value)
        return ChildStatus.HOME.value
    return status.value


def _dict_items(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def normalize_child(child: dict[str, Any]) -> Child:
    """Repair the shape of a child record."""
    from barnehage.group.utils import normalize_group_label  # noqa: PLC0415

    return {
        **child,
        "name": child.get("name") or UNKNOWN_CHILD_NAME,
        "age": child["age"] if _is_number(child.get("age")) else "",
        "group": normalize_group_label(child.get("group")),
        "status": normalize_status(child.get("status")),
        "allergies": child["allergies"]
        if isinstance(child.get("allergies"), list)
        else [],
        "consentGiven": bool(child.get("consentGiven")),
        "pickupAuthorizations": _dict_items(child.get("pickupAuthorizations")),
    }


def normalize_parent(parent: dict[str, Any]) -> Parent:
    """Repair the shape of a parent record."""
    return {
        **parent,
        "address": parent.get("address") or "",
        "verified": bool(parent.get("verified")),
        "childrenIds": parent["childrenIds"]
        if isinstance(parent.get("childrenIds"), list)
        else [],
    }


def normalize_activity(activity: dict[str, Any]) -> Activity:
    """Repair the shape of an activity record."""
    from barnehage.group.utils import normalize_group_label  # noqa: PLC0415

    normalized = dict(activity)
    group = normalize_group_label(activity.get("group"))
    if group:
        normalized["group"] = group
    else:
        normalized.pop("group", None)
    return normalized


def normalize_group(group: dict[str, Any]) -> Group:
    """Repair the shape of a stored group."""
    from barnehage.group.utils import normalize_group_label  # noqa: PLC0415

    return {
        **group,
        "name": normalize_group_label(group.get("name")) or group.get("name"),
        "currentCount": group["currentCount"]
        if _is_number(group.get("currentCount"))
        else 0,
        "totalCapacity": group["totalCapacity"]
        if _is_number(group.get("totalCapacity"))
        else 0,
    }


def normalize_message(message: dict[str, Any]) -> Message:
    """Repair the shape of a message record."""
    return {
        "id": message.get("id"),
        "parentId": parse_int(message.get("parentId")) or 0,
        "sender": SENDER_STAFF
        if message.get("sender") == SENDER_STAFF
        else SENDER_PARENT,
        "content": str(message.get("content") or "").strip(),
        "createdAt": message.get("createdAt") or now_iso(),
        "read": bool(message.get("read")),
    }


_NORMALIZERS = {
    "children": normalize_child,
    "parents": normalize_parent,
    "activities": normalize_activity,
    "groups": normalize_group,
    "messages": normalize_message,
}


def normalize_database(data: dict[str, Any]) -> Database:
    """Normalize every collection of a raw database document."""
    normalized: Database = {}
    for name in COLLECTIONS:
        items = data.get(name)
        normalize = _NORMALIZERS[name]
        normalized[name] = (
            [normalize(item) for item in items if isinstance(item, dict)]
            if isinstance(items, list)
            else []
        )
    return normalized


def next_id(items: list[dict[str, Any]]) -> int:
    """Return the next free integer id for a collection."""
    return max((item.get("id") or 0 for item in items), default=0) + 1


def find_by_id(items: list[dict[str, Any]], item_id: Any) -> Optional[dict[str, Any]]:
    """Return the item with the given id, if any."""
    wanted = parse_int(item_id)
    if wanted is None:
        return None
    return next((item for item in items if item.get("id") == wanted), None)


class JsonStore:
    """Read and write the database document.

    When no path is given the store uses the DATABASE_PATH setting of the
    current Flask app.
    """

    def __init__(self, path: Optional[str | os.PathLike[str]] = None) -> None:
        """Initialize the store."""
        self.path = os.fspath(path) if path is not None else None
        self._lock = threading.RLock()

    def init_app(self, app: Flask) -> None:
        """Register the store on a Flask app."""
        app.config.setdefault(
            "DATABASE_PATH", os.path.join(app.instance_path, DB_FILENAME)
        )
        app.extensions["json_store"] = self

    @property
    def database_path(self) -> str:
        """Return the path of the database file."""
        if self.path is not None:
            return self.path
        return current_app.config["DATABASE_PATH"]

    def read(self) -> Database:
        """Load and normalize the database."""
        path = self.database_path
        with self._lock:
            if not os.path.exists(path):
                logger.info("Database file %s not found, starting empty", path)
                return normalize_database({})
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        if not isinstance(raw, dict):
            logger.warning("Database file %s is not an object, starting empty", path)
            raw = {}
        return normalize_database(raw)

    def write(self, data: dict[str, Any]) -> Database:
        """Normalize and save the database, replacing the file atomically."""
        normalized = normalize_database(data)
        path = self.database_path
        directory = os.path.dirname(os.path.abspath(path))
        with self._lock:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(normalized, f, ensure_ascii=False, indent=2)
                os.replace(tmp_path, path)
            except BaseException:
                os.unlink(tmp_path)
                raise
        return normalized

    @contextmanager
    def transaction(self) -> Iterator[Database]:
        """Read the database, let the caller modify it, then save it.

        Nothing is written if the block raises.
        """
        with self._lock:
            data = self.read()
            yield data
            self.write(data)
