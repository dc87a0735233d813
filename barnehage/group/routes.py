"""Routes for the group blueprint."""

from flask import jsonify, request

from barnehage.core.forms import load_form, provided_data
from barnehage.errors import NotFoundError
from barnehage.extensions import store

from . import bp
from .forms import GroupForm
from .services import GroupService
from .utils import (
    get_all_groups,
    get_group_display_name,
    get_group_key,
    get_group_theme,
)


@bp.route("", methods=["GET"])
def list_groups():
    """List the stored groups."""
    return jsonify(GroupService.get_groups(store))


@bp.route("/definitions", methods=["GET"])
def list_group_definitions():
    """List the canonical groups with their display names and colors."""
    return jsonify(
        [{**group, "keywords": list(group["keywords"])} for group in get_all_groups()]
    )


@bp.route("/resolve", methods=["GET"])
def resolve_group():
    """Resolve a free-text group name to its canonical group."""
    name = request.args.get("name", "")
    return jsonify(
        {
            "input": name,
            "key": get_group_key(name),
            "display_name": get_group_display_name(name),
            "colors": get_group_theme(name),
        }
    )


@bp.route("/<int:group_id>", methods=["PUT"])
def update_group(group_id):
    """Update a stored group."""
    payload = request.get_json(silent=True)
    form = load_form(GroupForm, payload, partial=True)
    group = GroupService.update_group(store, group_id, provided_data(form, payload))
    if group is None:
        raise NotFoundError("Group not found")
    return jsonify(group)
