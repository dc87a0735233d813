"""Messaging between parents and staff."""

from flask import Blueprint

bp = Blueprint("message", __name__, url_prefix="/api/messages")

from . import routes  # noqa: E402

__all__ = ["routes"]
