"""Utility functions for the application."""

from __future__ import annotations

import math
import re
from typing import Any

_PHONE_RE = re.compile(r"[\d\s\-+()]{8,}")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def clean_text(value: Any) -> str:
    """Trim a value and strip angle brackets from it."""
    if value is None or value == "":
        return ""
    return str(value).strip().replace("<", "").replace(">", "")


def sanitize_url(url: Any) -> str:
    """Return a URL that is safe to store."""
    if not url:
        return ""
    return clean_text(url)


def is_valid_phone(phone: str) -> bool:
    """Check that a phone number has at least 8 digits or separators."""
    return bool(_PHONE_RE.fullmatch(phone or ""))


def parse_int(value: Any) -> int | None:
    """Parse the leading integer of a value, or None if there is none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT_RE.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else None
