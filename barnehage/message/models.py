"""Data models for parent-staff messaging."""

from barnehage.core.types import Record


class Message(Record, total=False):
    """A message between a parent and the staff."""

    parentId: int  # noqa: N815
    sender: str
    content: str
    read: bool
