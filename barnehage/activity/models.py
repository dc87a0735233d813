"""Data models for the activity feed."""

from __future__ import annotations

from typing import Optional, TypedDict

from barnehage.core.types import Record


class MediaItem(TypedDict, total=False):
    """An image or video attached to an activity."""

    type: str
    url: str
    posterUrl: str  # noqa: N815


class Activity(Record, total=False):
    """A post in the activity feed."""

    title: str
    description: str
    imageUrl: Optional[str]  # noqa: N815
    videoUrl: Optional[str]  # noqa: N815
    media: list[MediaItem]
    createdBy: str  # noqa: N815
    group: str
