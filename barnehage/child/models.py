"""Data models for the child blueprint."""

from __future__ import annotations

from typing import Optional, TypedDict, Union

from barnehage.core.types import Record


class PickupAuthorization(TypedDict, total=False):
    """Permission for someone other than the parent to collect a child."""

    id: int
    name: str
    relation: str
    phone: str
    validDate: str  # noqa: N815
    createdByParentId: Optional[int]  # noqa: N815
    createdAt: str  # noqa: N815


class Child(Record, total=False):
    """A child record in the JSON database."""

    name: str
    birthDate: str  # noqa: N815
    age: Union[int, float, str]
    group: str
    allergies: list[str]
    status: str
    checkedInAt: Optional[str]  # noqa: N815
    checkedOutAt: Optional[str]  # noqa: N815
    parentId: int  # noqa: N815
    consentGiven: bool  # noqa: N815
    pickupAuthorizations: list[PickupAuthorization]  # noqa: N815
