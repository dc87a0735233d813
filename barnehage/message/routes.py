"""Routes for parent-staff messaging."""

from flask import jsonify, request

from barnehage.core.forms import load_form, provided_data
from barnehage.errors import NotFoundError
from barnehage.extensions import store

from . import bp
from .forms import MessageForm
from .services import MessageService


@bp.route("", methods=["GET"])
def list_messages():
    """List messages, optionally for one parent."""
    return jsonify(MessageService.get_messages(store, request.args.get("parentId")))


@bp.route("", methods=["POST"])
def send_message():
    """Send a message."""
    payload = request.get_json(silent=True)
    form = load_form(MessageForm, payload)
    message = MessageService.add_message(store, provided_data(form, payload))
    return jsonify(message), 201


@bp.route("/<int:message_id>/read", methods=["POST"])
def mark_read(message_id):
    """Mark a message as read."""
    message = MessageService.mark_read(store, message_id)
    if message is None:
        raise NotFoundError("Message not found")
    return jsonify(message)
