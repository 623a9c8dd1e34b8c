"""Public signup routes."""

from flask import Blueprint, render_template, request

from golfoutings.lib.current_app import get_outing_manager
from golfoutings.lib.errors import EventNotFoundError, ValidationError
from golfoutings.lib.logger import log_endpoint_access
from golfoutings.lib.utils import translate

signup_bp = Blueprint("signup", __name__)


@signup_bp.route("/signup/<event_id>", methods=["GET"])
@log_endpoint_access
def signup_form(event_id: str):
    try:
        event = get_outing_manager().get_event(event_id)
    except EventNotFoundError as e:
        return translate(e.message), 404
    return render_template("signup.html", title=event.title, event=event)


@signup_bp.route("/signup/<event_id>", methods=["POST"])
@log_endpoint_access
def submit_signup(event_id: str):
    """Register a participant for an event.

    Name and email are required; phone, handicap and notes are optional.
    The confirmation email goes out in the background, so the response
    never depends on mail delivery.
    """
    d = request.form.to_dict()
    try:
        event, signup = get_outing_manager().create_signup(
            event_id,
            name=d.get("name"),
            email=d.get("email"),
            phone=d.get("phone"),
            handicap=d.get("handicap"),
            notes=d.get("notes"),
        )
    except EventNotFoundError as e:
        return translate(e.message), 404
    except ValidationError as e:
        return translate(e.message), 400

    return render_template("signup_success.html", title=event.title, event=event, signup=signup)
