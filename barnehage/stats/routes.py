"""Routes for attendance statistics."""

from typing import Any

from flask import jsonify

from barnehage.extensions import store

from . import bp
from .services import StatsService


@bp.route("", methods=["GET"])
def get_stats() -> Any:
    """Return attendance totals for today."""
    return jsonify(StatsService.get_stats(store))


@bp.route("/groups", methods=["GET"])
def get_group_stats() -> Any:
    """Return the checked-in count of each group."""
    return jsonify(StatsService.get_stats(store)["groups"])
