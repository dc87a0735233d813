"""Routes for the child blueprint."""

from flask import jsonify, request

from barnehage.core.forms import load_form, provided_data
from barnehage.errors import NotFoundError
from barnehage.extensions import store

from . import bp
from .forms import ChildForm
from .services import ChildService
from .utils import (
    get_all_statuses,
    get_status_color,
    get_status_label,
    normalize_child_for_display,
)


def _found(child):
    if child is None:
        raise NotFoundError("Child not found")
    return child


@bp.route("", methods=["GET"])
def list_children():
    """List children, optionally filtered by group."""
    children = ChildService.get_children(store, request.args.get("group"))
    if request.args.get("display"):
        children = [normalize_child_for_display(child) for child in children]
    return jsonify(children)


@bp.route("", methods=["POST"])
def create_child():
    """Register a new child."""
    payload = request.get_json(silent=True)
    form = load_form(ChildForm, payload)
    data = provided_data(form, payload)
    data["allergies"] = payload.get("allergies")
    child = ChildService.add_child(store, data)
    return jsonify(child), 201


@bp.route("/statuses", methods=["GET"])
def list_statuses():
    """List the attendance statuses with their labels and colors."""
    return jsonify(
        [
            {
                "value": status.value,
                "label": get_status_label(status),
                "color": get_status_color(status),
            }
            for status in get_all_statuses()
        ]
    )


@bp.route("/<int:child_id>", methods=["GET"])
def get_child(child_id):
    """Return a single child."""
    return jsonify(_found(ChildService.get_child(store, child_id)))


@bp.route("/<int:child_id>", methods=["PUT"])
def update_child(child_id):
    """Update some fields of a child."""
    payload = request.get_json(silent=True)
    form = load_form(ChildForm, payload, partial=True)
    updates = provided_data(form, payload)
    updates.pop("parentId", None)
    for key in ("allergies", "checkedInAt", "checkedOutAt"):
        if key in payload:
            updates[key] = payload[key]
    return jsonify(_found(ChildService.update_child(store, child_id, updates)))


@bp.route("/<int:child_id>/checkin", methods=["POST"])
def check_in(child_id):
    """Check a child in."""
    return jsonify(_found(ChildService.check_in(store, child_id)))


@bp.route("/<int:child_id>/checkout", methods=["POST"])
def check_out(child_id):
    """Check a child out."""
    return jsonify(_found(ChildService.check_out(store, child_id)))


@bp.route("/<int:child_id>/home", methods=["POST"])
def mark_home(child_id):
    """Mark a child as staying home."""
    return jsonify(_found(ChildService.mark_home(store, child_id)))
