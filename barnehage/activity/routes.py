"""Routes for the activity feed."""

from flask import current_app, jsonify, request

from barnehage.core.constants import MAX_MEDIA_ITEMS
from barnehage.core.forms import load_form, provided_data
from barnehage.errors import ValidationError
from barnehage.extensions import store
from barnehage.filters import get_available_dates
from barnehage.utils import parse_int

from . import bp
from .forms import ActivityForm
from .services import ActivityService
from .utils import sanitize_media


def _media(payload):
    media = payload.get("media")
    if not isinstance(media, list):
        return None
    if len(media) > MAX_MEDIA_ITEMS:
        raise ValidationError(f"Too many media items (max {MAX_MEDIA_ITEMS})")
    return sanitize_media(media)


@bp.route("", methods=["GET"])
def list_activities():
    """List activities, newest first.

    Query parameters:
        group: only activities of this group, in any spelling.
        date: only activities posted on this YYYY-MM-DD date.
        display: only activities of known groups, with display names.
        limit, offset: return a page instead of a plain list.
    """
    activities = ActivityService.get_activities(
        store,
        group=request.args.get("group"),
        date=request.args.get("date"),
        display=bool(request.args.get("display")),
    )
    if "limit" not in request.args and "offset" not in request.args:
        return jsonify(activities)

    limit = parse_int(request.args.get("limit"))
    offset = parse_int(request.args.get("offset"))
    page = ActivityService.paginate(
        activities,
        limit if limit is not None else current_app.config["ACTIVITIES_PAGE_LIMIT"],
        offset or 0,
    )
    return jsonify(page)


@bp.route("/dates", methods=["GET"])
def list_activity_dates():
    """List the dates that have activities, newest first."""
    activities = ActivityService.get_activities(store, group=request.args.get("group"))
    return jsonify(get_available_dates(activities))


@bp.route("", methods=["POST"])
def create_activity():
    """Post a new activity."""
    payload = request.get_json(silent=True)
    form = load_form(ActivityForm, payload)
    data = provided_data(form, payload)
    data["media"] = _media(payload)
    return jsonify(ActivityService.add_activity(store, data)), 201
