"""Group name normalization and theming.

Every layer that needs to compare, display or persist a group label goes
through this module, so "Blå", "BLÅ", "Blå gruppe", "bla." and the
mis-encoded "blĺ" all end up as the same canonical key.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

from barnehage.core.constants import DEFAULT_GROUP_COLORS, GROUP_DEFINITIONS
from barnehage.core.types import GroupColors, GroupInfo

# UTF-8 text that was decoded as Windows-1252
_MOJIBAKE_SEQUENCES = (
    ("Ã¥", "å"),
    ("Ã…", "Å"),
    ("Ã¸", "ø"),
    ("Ã˜", "Ø"),
    ("Ã¦", "æ"),
    ("Ã†", "Æ"),
)

# Windows-1252 bytes that were decoded as Windows-1250
_MISDECODED_LETTERS = str.maketrans(
    {"ĺ": "å", "Ĺ": "Å", "ř": "ø", "Ř": "Ø", "ć": "æ", "Ć": "Æ"}
)

# Letters that have no canonical decomposition
_TRANSLITERATIONS = str.maketrans({"ø": "o", "æ": "ae", "ß": "ss"})

_NON_ALPHA = re.compile(r"[^a-z]")


def _repair_encoding(value: str) -> str:
    for broken, letter in _MOJIBAKE_SEQUENCES:
        value = value.replace(broken, letter)
    return value.translate(_MISDECODED_LETTERS)


def normalize_group_name(value: Any) -> str:
    """Return the matching slug for a group label.

    The slug is lowercase ASCII letters only: accents are stripped,
    punctuation and whitespace are dropped. Empty input yields "".
    """
    if not isinstance(value, str) or not value:
        return ""
    text = _repair_encoding(value).lower().translate(_TRANSLITERATIONS)
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALPHA.sub("", stripped)


_NORMALIZED_KEYWORDS = {
    key: tuple(normalize_group_name(keyword) for keyword in definition["keywords"])
    for key, definition in GROUP_DEFINITIONS.items()
}


def get_group_key(value: Any) -> str | None:
    """Resolve a free-text group label to its canonical key, or None."""
    slug = normalize_group_name(value)
    if not slug:
        return None

    # Short forms take precedence over the keyword scan.
    if "bla" in slug:
        return "bla"
    if "rod" in slug or "red" in slug:
        return "rod"

    for key, keywords in _NORMALIZED_KEYWORDS.items():
        if any(keyword and keyword in slug for keyword in keywords):
            return key
    return None


def get_group_theme(value: Any) -> GroupColors:
    """Return the color theme for a group label, or the default theme."""
    key = get_group_key(value)
    colors = GROUP_DEFINITIONS[key]["colors"] if key else DEFAULT_GROUP_COLORS
    return GroupColors(**colors)


def get_group_text_style(value: Any) -> dict[str, str]:
    """Return a text style mapping for a group label."""
    return {"color": get_group_theme(value)["text"]}


def get_group_display_name(value: Any) -> str:
    """Return the canonical display name for a key or free-text label.

    An empty string means the group is unknown and should not be shown in
    group-specific views.
    """
    if isinstance(value, str) and value in GROUP_DEFINITIONS:
        key: str | None = value
    else:
        key = get_group_key(value)
    if not key:
        return ""
    return GROUP_DEFINITIONS[key]["display_name"]


def is_valid_group(value: Any) -> bool:
    """Check whether a label resolves to a known group."""
    return get_group_key(value) is not None


def get_all_groups() -> list[GroupInfo]:
    """List every defined group in declaration order."""
    return [
        GroupInfo(
            key=key,
            display_name=definition["display_name"],
            keywords=definition["keywords"],
            colors=GroupColors(**definition["colors"]),
        )
        for key, definition in GROUP_DEFINITIONS.items()
    ]


def normalize_group_label(value: Any) -> str:
    """Return the label a group should be stored under.

    Known groups are stored under their display name, anything else keeps
    its trimmed original text.
    """
    if not value:
        return ""
    raw = str(value).strip()
    return get_group_display_name(raw) or raw


def groups_equal(a: Any, b: Any) -> bool:
    """Compare two group labels regardless of spelling."""
    key_a = get_group_key(a)
    key_b = get_group_key(b)
    if key_a or key_b:
        return key_a == key_b
    return normalize_group_name(a) == normalize_group_name(b)
