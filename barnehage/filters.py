"""Filtering and sorting helpers for children and activities."""

from __future__ import annotations

import datetime
import unicodedata
from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from barnehage.dates import parse_iso, to_date_key
from barnehage.group.utils import groups_equal

if TYPE_CHECKING:
    from barnehage.activity.models import Activity
    from barnehage.child.models import Child

# Norwegian collation puts æ, ø and å after z.
_NB_TAIL_LETTERS = str.maketrans({"æ": "{", "ø": "|", "å": "}"})


def _nb_sort_key(name: str) -> str:
    text = (name or "").casefold().translate(_NB_TAIL_LETTERS)
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def filter_activities(
    activities: list[Activity],
    group: Optional[str] = None,
    date: Optional[str] = None,
) -> list[Activity]:
    """Filter activities by group and/or YYYY-MM-DD date."""
    return [
        activity
        for activity in activities
        if (not group or groups_equal(activity.get("group"), group))
        and (not date or to_date_key(activity.get("createdAt")) == date)
    ]


def get_activity_groups(activities: list[Activity]) -> list[str]:
    """Return the distinct group labels used by activities."""
    return _unique(activity.get("group", "") for activity in activities)


def get_child_groups(children: list[Child]) -> list[str]:
    """Return the distinct group labels used by children."""
    return _unique(child.get("group", "") for child in children)


def get_available_dates_for_group(activities: list[Activity], group: str) -> list[str]:
    """Return the dates with activities for a group, newest first."""
    keys = {
        to_date_key(activity.get("createdAt"))
        for activity in activities
        if groups_equal(activity.get("group"), group)
    }
    keys.discard("")
    return sorted(keys, reverse=True)


def get_available_dates(activities: list[Activity]) -> list[str]:
    """Return all dates with activities, newest first."""
    keys = {to_date_key(activity.get("createdAt")) for activity in activities}
    keys.discard("")
    return sorted(keys, reverse=True)


def filter_children_by_group(children: list[Child], group: str) -> list[Child]:
    """Return the children that belong to a group."""
    return [child for child in children if groups_equal(child.get("group"), group)]


def sort_children_alphabetically(children: list[Child]) -> list[Child]:
    """Sort children by name in Norwegian alphabetical order."""
    return sorted(children, key=lambda child: _nb_sort_key(child.get("name", "")))


def sort_activities_by_date_descending(activities: list[Activity]) -> list[Activity]:
    """Sort activities newest first; undated activities go last."""
    oldest = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)
    return sorted(
        activities,
        key=lambda activity: parse_iso(activity.get("createdAt")) or oldest,
        reverse=True,
    )
