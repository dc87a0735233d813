"""Service layer for attendance statistics."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any

from barnehage.child.statuses import ChildStatus
from barnehage.group.utils import get_group_key, normalize_group_name

if TYPE_CHECKING:
    from barnehage.store import JsonStore


def _group_bucket(label: Any) -> str:
    return get_group_key(label) or normalize_group_name(label)


class StatsService:
    """Service for attendance totals."""

    @staticmethod
    def get_stats(store: JsonStore) -> dict[str, Any]:
        """Count children per status and checked-in children per group."""
        db = store.read()
        children = db["children"]
        statuses = Counter(child["status"] for child in children)
        checked_in_per_group = Counter(
            _group_bucket(child["group"])
            for child in children
            if child["status"] == ChildStatus.CHECKED_IN
        )

        groups = [
            {
                **group,
                "currentCount": checked_in_per_group[_group_bucket(group["name"])],
            }
            for group in db["groups"]
        ]
        return {
            "totalChildren": len(children),
            "checkedIn": statuses[ChildStatus.CHECKED_IN.value],
            "checkedOut": statuses[ChildStatus.CHECKED_OUT.value],
            "home": statuses[ChildStatus.HOME.value],
            "groups": groups,
        }
