"""Parent and guardian profiles."""

from flask import Blueprint

bp = Blueprint("parent", __name__, url_prefix="/api/parents")

from . import routes  # noqa: E402

__all__ = ["routes"]
