from flask import Blueprint, render_template

from golfoutings.lib.current_app import get_outing_manager
from golfoutings.lib.logger import log_endpoint_access

home_bp = Blueprint("home", __name__)


@home_bp.route("/")
@log_endpoint_access
def home():
    events = get_outing_manager().list_events()
    return render_template("index.html", title="Events", events=events)
