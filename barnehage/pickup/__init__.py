"""Pickup authorizations for people collecting a child."""

from flask import Blueprint

bp = Blueprint("pickup", __name__, url_prefix="/api")

from . import routes  # noqa: E402

__all__ = ["routes"]
