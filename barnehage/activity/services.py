"""Service layer for the activity feed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from flask import current_app

from barnehage.core.constants import DEFAULT_ACTIVITY_GROUP, SENDER_STAFF
from barnehage.core.types import Page
from barnehage.dates import now_iso
from barnehage.filters import filter_activities, sort_activities_by_date_descending
from barnehage.store import next_id, normalize_activity
from barnehage.utils import sanitize_url

from .utils import normalize_activity_for_display

if TYPE_CHECKING:
    from barnehage.store import JsonStore

    from .models import Activity


class ActivityService:
    """Service class for activity-related operations."""

    @staticmethod
    def get_activities(
        store: JsonStore,
        group: Optional[str] = None,
        date: Optional[str] = None,
        display: bool = False,
    ) -> list[Activity]:
        """Return activities newest first, optionally filtered.

        With ``display`` only activities of known groups are returned, with
        the group mapped to its display name.
        """
        activities = filter_activities(store.read()["activities"], group, date)
        if display:
            activities = [
                shown
                for shown in map(normalize_activity_for_display, activities)
                if shown is not None
            ]
        return sort_activities_by_date_descending(activities)

    @staticmethod
    def paginate(activities: list[Activity], limit: int, offset: int) -> Page:
        """Slice a list of activities into a page."""
        limit = max(limit, 0)
        offset = max(offset, 0)
        return Page(
            items=activities[offset : offset + limit],
            total=len(activities),
            limit=limit,
            offset=offset,
        )

    @staticmethod
    def add_activity(store: JsonStore, data: dict[str, Any]) -> Activity:
        """Post a new activity to the feed.

        Activities are always posted by staff. Without a group they are posted to
        "Blå gruppe".
        """
        with store.transaction() as db:
            activity: dict[str, Any] = {
                "id": next_id(db["activities"]),
                "title": data["title"],
                "description": data["description"],
                "imageUrl": sanitize_url(data.get("imageUrl")) or None,
                "videoUrl": sanitize_url(data.get("videoUrl")) or None,
                "createdBy": SENDER_STAFF,
                "createdAt": now_iso(),
                "group": data.get("group") or DEFAULT_ACTIVITY_GROUP,
            }
            if data.get("media") is not None:
                activity["media"] = data["media"]
            activity = normalize_activity(activity)
            db["activities"].append(activity)
        current_app.logger.info(
            f"Posted activity {activity['id']} for {activity.get('group')!r}"
        )
        return activity
