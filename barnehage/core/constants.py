"""Global constants for the barnehage application."""

from types import MappingProxyType

from .types import GroupColors, GroupDefinition

# Database-related constants
DB_FILENAME = "database.json"
COLLECTIONS = ("children", "parents", "activities", "groups", "messages")

# Group definitions, in display order
GROUP_DEFINITIONS: "MappingProxyType[str, GroupDefinition]" = MappingProxyType(
    {
        "bla": GroupDefinition(
            display_name="Blå gruppe",
            keywords=("blå", "bla", "blue"),
            colors=GroupColors(text="#2563EB", background="#DBEAFE", border="#93C5FD"),
        ),
        "rod": GroupDefinition(
            display_name="Rød gruppe",
            keywords=("rød", "rod", "roed", "red"),
            colors=GroupColors(text="#DC2626", background="#FECACA", border="#FCA5A5"),
        ),
    }
)

DEFAULT_GROUP_COLORS: GroupColors = GroupColors(
    text="#374151", background="#E5E7EB", border="#D1D5DB"
)

# Palette colors used for status badges
PALETTE_BORDER = "#E5E7EB"
PALETTE_STATUS_IN = "#DCFCE7"
PALETTE_STATUS_OUT = "#FEE2E2"
PALETTE_STATUS_HOME = "#E5E7EB"

# Child display fallbacks
UNKNOWN_CHILD_NAME = "Ukjent barn"
CHILD_NAME_FALLBACK = "Barn {id}"

# Payload limits
MAX_NAME_LENGTH = 200
MAX_EMAIL_LENGTH = 320
MAX_PHONE_LENGTH = 50
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000
MAX_MEDIA_ITEMS = 12
MEDIA_TYPES = ("image", "video")

# Message senders
SENDER_PARENT = "parent"
SENDER_STAFF = "staff"

# Activity feed
ACTIVITIES_PAGE_LIMIT = 20
DEFAULT_ACTIVITY_GROUP = "Blå gruppe"
