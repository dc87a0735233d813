"""Child attendance statuses and their Norwegian texts."""

from enum import Enum
from types import MappingProxyType


class ChildStatus(str, Enum):
    """A child's attendance state for the day."""

    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    HOME = "home"


STATUS_LABELS = MappingProxyType(
    {
        ChildStatus.CHECKED_IN: "inne",
        ChildStatus.CHECKED_OUT: "ute",
        ChildStatus.HOME: "hjemme",
    }
)

STATUS_DESCRIPTIONS = MappingProxyType(
    {
        ChildStatus.CHECKED_IN: "{name} er for tiden i barnehagen.",
        ChildStatus.CHECKED_OUT: "{name} er ikke sjekket inn.",
        ChildStatus.HOME: "{name} er meldt hjemme i dag.",
    }
)

UNKNOWN_STATUS_DESCRIPTION = "{name} status er ukjent."
