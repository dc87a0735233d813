"""Routes for the parent blueprint."""

from flask import jsonify, request

from barnehage.child.services import ChildService
from barnehage.core.forms import load_form, provided_data
from barnehage.errors import NotFoundError, ValidationError
from barnehage.extensions import store

from . import bp
from .forms import ParentForm
from .services import ParentService


def _children_ids(payload):
    ids = payload.get("childrenIds")
    if ids is None:
        return None
    if not isinstance(ids, list) or not all(
        isinstance(i, int) and not isinstance(i, bool) for i in ids
    ):
        raise ValidationError("childrenIds must be a list of integers.")
    return ids


@bp.route("", methods=["GET"])
def list_parents():
    """List all parents."""
    return jsonify(ParentService.get_parents(store))


@bp.route("", methods=["POST"])
def create_parent():
    """Create a parent profile."""
    payload = request.get_json(silent=True)
    form = load_form(ParentForm, payload)
    data = provided_data(form, payload)
    data["childrenIds"] = _children_ids(payload)
    return jsonify(ParentService.create_parent(store, data)), 201


@bp.route("/<int:parent_id>", methods=["GET"])
def get_parent(parent_id):
    """Return a single parent."""
    parent = ParentService.get_parent(store, parent_id)
    if parent is None:
        raise NotFoundError("Parent not found")
    return jsonify(parent)


@bp.route("/<int:parent_id>", methods=["PUT"])
def update_parent(parent_id):
    """Update some fields of a parent."""
    payload = request.get_json(silent=True)
    form = load_form(ParentForm, payload, partial=True)
    updates = provided_data(form, payload)
    if "childrenIds" in payload:
        updates["childrenIds"] = _children_ids(payload)
    parent = ParentService.update_parent(store, parent_id, updates)
    if parent is None:
        raise NotFoundError("Parent not found")
    return jsonify(parent)


@bp.route("/<int:parent_id>/children", methods=["GET"])
def list_parent_children(parent_id):
    """List the children of a parent."""
    if ParentService.get_parent(store, parent_id) is None:
        raise NotFoundError("Parent not found")
    return jsonify(ChildService.get_children_for_parent(store, parent_id))
