"""Service layer for pickup authorizations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import current_app

from barnehage.child.models import PickupAuthorization
from barnehage.dates import now_iso
from barnehage.errors import NotFoundError
from barnehage.store import find_by_id, next_id
from barnehage.utils import clean_text

if TYPE_CHECKING:
    from barnehage.store import JsonStore


class PickupService:
    """Service class for pickup authorizations."""

    @staticmethod
    def add_authorization(
        store: JsonStore, data: dict[str, Any]
    ) -> PickupAuthorization:
        """Authorize someone to collect a child on one date.

        Raises:
            NotFoundError: If the child does not exist.
        """
        with store.transaction() as db:
            child = find_by_id(db["children"], data.get("childId"))
            if child is None:
                raise NotFoundError("Child not found")

            existing = [
                authorization
                for other in db["children"]
                for authorization in other["pickupAuthorizations"]
            ]
            authorization = PickupAuthorization(
                id=next_id(existing),
                name=clean_text(data.get("name")),
                relation=clean_text(data.get("relation")),
                phone=clean_text(data.get("phone")),
                validDate=data["validDate"],
                createdByParentId=data.get("createdByParentId"),
                createdAt=now_iso(),
            )
            child["pickupAuthorizations"].append(authorization)

        current_app.logger.info(
            f"Child {child['id']} may be picked up by {authorization['name']!r} "
            f"on {authorization['validDate']}"
        )
        return authorization

    @staticmethod
    def get_pickups_for_date(store: JsonStore, date: str) -> list[dict[str, Any]]:
        """Return every child with the authorizations valid on a date."""
        return [
            {
                "childId": child["id"],
                "childName": child["name"],
                "pickupAuthorizations": [
                    authorization
                    for authorization in child["pickupAuthorizations"]
                    if authorization.get("validDate") == date
                ],
            }
            for child in store.read()["children"]
        ]
