"""Data models for the group blueprint."""

from barnehage.core.types import Record


class Group(Record, total=False):
    """A stored group with its capacity."""

    name: str
    totalCapacity: int  # noqa: N815
    currentCount: int  # noqa: N815
