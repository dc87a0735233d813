"""Core data types for the barnehage application."""

from typing import Any, Optional, TypedDict


class GroupColors(TypedDict):
    """Color theme used to render a group."""

    text: str
    background: str
    border: str


class GroupDefinition(TypedDict):
    """Static definition of a canonical kindergarten group."""

    display_name: str
    keywords: tuple[str, ...]
    colors: GroupColors


class GroupInfo(GroupDefinition):
    """A group definition together with its canonical key."""

    key: str


class _RecordBase(TypedDict):
    id: int


class Record(_RecordBase, total=False):
    """Generic record stored in the JSON database."""

    createdAt: Optional[str]  # noqa: N815


class Page(TypedDict):
    """A page of results."""

    items: list[Any]
    total: int
    limit: int
    offset: int
