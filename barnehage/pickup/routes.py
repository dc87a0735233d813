"""Routes for pickup authorizations."""

from flask import jsonify, request

from barnehage.core.forms import load_form, provided_data
from barnehage.dates import get_today_key, is_date_key
from barnehage.errors import ValidationError
from barnehage.extensions import store

from . import bp
from .forms import PickupAuthorizationForm
from .services import PickupService


@bp.route("/transfer", methods=["POST"])
def create_pickup_authorization():
    """Let someone other than the parent collect a child on a given day."""
    payload = request.get_json(silent=True)
    form = load_form(PickupAuthorizationForm, payload)
    authorization = PickupService.add_authorization(
        store, provided_data(form, payload)
    )
    return jsonify(authorization), 201


@bp.route("/pickup-today", methods=["GET"])
def list_pickups():
    """List each child's pickup authorizations for a date, today by default."""
    date = request.args.get("date") or get_today_key()
    if not is_date_key(date):
        raise ValidationError("Invalid date format (use YYYY-MM-DD).")
    return jsonify(PickupService.get_pickups_for_date(store, date))
