"""Utility functions for the activity feed."""

from __future__ import annotations

from typing import Any, Optional

from barnehage.core.constants import MEDIA_TYPES
from barnehage.group.utils import get_group_display_name, get_group_key
from barnehage.utils import sanitize_url

from .models import Activity, MediaItem


def normalize_activity_for_display(activity: Activity) -> Optional[Activity]:
    """Map an activity's group to its display name.

    Activities outside the known groups give None and should not be shown.
    """
    key = get_group_key(activity.get("group"))
    if not key:
        return None
    return {**activity, "group": get_group_display_name(key)}


def sanitize_media(items: Any) -> list[MediaItem]:
    """Keep well-formed image and video items and clean their URLs."""
    media: list[MediaItem] = []
    for item in items or []:
        if not isinstance(item, dict) or not item.get("url"):
            continue
        if item.get("type") not in MEDIA_TYPES:
            continue
        entry = MediaItem(type=item["type"], url=sanitize_url(item["url"]))
        if item.get("posterUrl"):
            entry["posterUrl"] = sanitize_url(item["posterUrl"])
        media.append(entry)
    return media
