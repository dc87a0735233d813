"""Date helpers shared by the feed and attendance views."""

from __future__ import annotations

import datetime
import re
from typing import Any

WEEKDAYS_NB = (
    "mandag",
    "tirsdag",
    "onsdag",
    "torsdag",
    "fredag",
    "lørdag",
    "søndag",
)
MONTHS_NB = (
    "januar",
    "februar",
    "mars",
    "april",
    "mai",
    "juni",
    "juli",
    "august",
    "september",
    "oktober",
    "november",
    "desember",
)
TODAY_LABEL = "I dag"

_DATE_KEY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def utc_now() -> datetime.datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def now_iso() -> str:
    """Return the current time as an ISO 8601 string with milliseconds."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: Any) -> datetime.datetime | None:
    """Parse an ISO timestamp into an aware UTC datetime, or None."""
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed.astimezone(datetime.timezone.utc)


def to_date_key(value: Any) -> str:
    """Convert a timestamp to its YYYY-MM-DD key in UTC.

    Unparseable values give an empty string.
    """
    parsed = parse_iso(value)
    return parsed.date().isoformat() if parsed else ""


def is_date_key(value: Any) -> bool:
    """Check that a value is a real calendar date written as YYYY-MM-DD."""
    if not isinstance(value, str) or not _DATE_KEY_RE.fullmatch(value):
        return False
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def get_today_key() -> str:
    """Return today's date key."""
    return utc_now().date().isoformat()


def _format_nb(day: datetime.date, with_year: bool = False) -> str:
    label = f"{WEEKDAYS_NB[day.weekday()]} {day.day}. {MONTHS_NB[day.month - 1]}"
    return f"{label} {day.year}" if with_year else label


def format_date_label(key: str) -> str:
    """Format a date key as "I dag" or e.g. "fredag 12. desember"."""
    if key == get_today_key():
        return TODAY_LABEL
    try:
        day = datetime.date.fromisoformat(key)
    except (TypeError, ValueError):
        return key
    return _format_nb(day)


def get_date_label() -> str:
    """Return today's full date, e.g. "fredag 12. desember 2025"."""
    return _format_nb(utc_now().date(), with_year=True)


def compare_date_keys(a: str, b: str) -> int:
    """Compare two date keys, returning -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def sort_dates_descending(dates: list[str]) -> list[str]:
    """Return date keys sorted newest first."""
    return sorted(dates, reverse=True)
