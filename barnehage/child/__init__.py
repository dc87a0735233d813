"""Children, attendance statuses and check-in/check-out."""

from flask import Blueprint

bp = Blueprint("child", __name__, url_prefix="/api/children")

from . import routes  # noqa: E402

__all__ = ["routes"]
