"""Data models for the parent blueprint."""

from barnehage.core.types import Record


class Parent(Record, total=False):
    """A parent or guardian record."""

    name: str
    email: str
    phone: str
    address: str
    verified: bool
    childrenIds: list[int]  # noqa: N815
