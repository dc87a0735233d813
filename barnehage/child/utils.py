"""Status helpers and display sanitization for children."""

from __future__ import annotations

import math
from typing import Any

from barnehage.core.constants import (
    CHILD_NAME_FALLBACK,
    PALETTE_BORDER,
    PALETTE_STATUS_HOME,
    PALETTE_STATUS_IN,
    PALETTE_STATUS_OUT,
    UNKNOWN_CHILD_NAME,
)
from barnehage.group.utils import get_group_display_name, get_group_key

from .models import Child
from .statuses import (
    STATUS_DESCRIPTIONS,
    STATUS_LABELS,
    UNKNOWN_STATUS_DESCRIPTION,
    ChildStatus,
)

_STATUS_VALUES = frozenset(status.value for status in ChildStatus)

_STATUS_COLORS = {
    ChildStatus.CHECKED_IN: PALETTE_STATUS_IN,
    ChildStatus.CHECKED_OUT: PALETTE_STATUS_OUT,
    ChildStatus.HOME: PALETTE_STATUS_HOME,
}


def is_valid_status(value: Any) -> bool:
    """Check that a value is exactly one of the defined statuses."""
    if isinstance(value, ChildStatus):
        return True
    return isinstance(value, str) and value in _STATUS_VALUES


def to_child_status(value: Any) -> ChildStatus | None:
    """Convert an untrusted value to a ChildStatus, or None if invalid."""
    if not is_valid_status(value):
        return None
    return ChildStatus(value)


def get_status_label(value: Any) -> str | None:
    """Return the short Norwegian label for a status.

    Unrecognized values give None rather than a made-up label.
    """
    status = to_child_status(value)
    if status is None:
        return None
    return STATUS_LABELS[status]


def get_status_description(child_name: str, value: Any) -> str:
    """Return a sentence describing where the child is."""
    status = to_child_status(value)
    template = STATUS_DESCRIPTIONS[status] if status else UNKNOWN_STATUS_DESCRIPTION
    return template.format(name=child_name)


def get_status_color(value: Any) -> str:
    """Return the badge color for a status."""
    status = to_child_status(value)
    if status is None:
        return PALETTE_BORDER
    return _STATUS_COLORS[status]


def get_all_statuses() -> list[ChildStatus]:
    """Return all statuses in declaration order."""
    return list(ChildStatus)


def _sanitize_child_name(name: Any, child_id: Any) -> str:
    trimmed = str(name or "").strip()
    if not trimmed or trimmed.lower() == UNKNOWN_CHILD_NAME.lower():
        return CHILD_NAME_FALLBACK.format(id=child_id)
    return trimmed


def _sanitize_age(age: Any) -> int | float:
    if isinstance(age, bool) or not isinstance(age, (int, float)):
        return 0
    return age if math.isfinite(age) and age > 0 else 0


def normalize_child_for_display(child: Child) -> Child:
    """Return a copy of a child that is safe to show.

    Unknown groups become "" and placeholder names become "Barn <id>".
    """
    key = get_group_key(child.get("group"))
    return {
        **child,
        "name": _sanitize_child_name(child.get("name"), child.get("id")),
        "age": _sanitize_age(child.get("age")),
        "group": get_group_display_name(key) if key else "",
    }
