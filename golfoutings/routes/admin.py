"""Admin dashboard, event creation and participant notification routes."""

from flask import Blueprint, redirect, render_template, request, url_for

from golfoutings.lib.current_app import admin_required, get_outing_manager
from golfoutings.lib.errors import EventNotFoundError, ValidationError
from golfoutings.lib.logger import log_endpoint_access
from golfoutings.lib.utils import translate

admin_bp = Blueprint("admin", __name__)


def _render_dashboard(message: str | None = None):
    return render_template(
        "admin_dashboard.html",
        title="Dashboard",
        grouped=get_outing_manager().grouped_signups(),
        message=message,
    )


@admin_bp.route("/admin", methods=["GET"])
@log_endpoint_access
@admin_required
def dashboard():
    return _render_dashboard()


@admin_bp.route("/admin/events/new", methods=["GET"])
@log_endpoint_access
@admin_required
def new_event():
    return render_template("admin_event_form.html", title="New event", form={}, error=None)


@admin_bp.route("/admin/events/new", methods=["POST"])
@log_endpoint_access
@admin_required
def create_event():
    d = request.form.to_dict()
    try:
        get_outing_manager().create_event(
            title=d.get("title"),
            date=d.get("date"),
            location=d.get("location"),
            description=d.get("description"),
        )
    except ValidationError as e:
        # Redisplay the form with what was typed so far
        return render_template(
            "admin_event_form.html", title="New event", form=d, error=translate(e.message)
        )
    return redirect(url_for("admin.dashboard"))


@admin_bp.route("/admin/notify/<event_id>", methods=["POST"])
@log_endpoint_access
@admin_required
def notify(event_id: str):
    """Email a reminder to everyone signed up for the event.

    Waits for every recipient to be attempted, then shows the dashboard with
    the number of emails that went out.
    """
    try:
        sent = get_outing_manager().notify_participants(event_id)
    except EventNotFoundError as e:
        return translate(e.message), 404
    return _render_dashboard(translate("Sent %(count)d emails.", count=sent))
