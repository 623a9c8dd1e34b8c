from flask import Blueprint, flash, redirect, render_template, request, session, url_for

from golfoutings.lib.current_app import admin_required, get_authorizer
from golfoutings.lib.logger import log_endpoint_access
from golfoutings.lib.utils import translate

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/admin/login", methods=["GET"])
@log_endpoint_access
def login():
    return render_template("admin_login.html", title="Admin login", error=None)


@auth_bp.route("/admin/login", methods=["POST"])
@log_endpoint_access
def authenticate():
    d = request.form.to_dict()
    if get_authorizer().login(session, d.get("username"), d.get("password")):
        return redirect(url_for("admin.dashboard"))
    return render_template(
        "admin_login.html", title="Admin login", error=translate("Invalid credentials")
    )


@auth_bp.route("/admin/logout", methods=["POST"])
@log_endpoint_access
@admin_required
def logout():
    get_authorizer().logout(session)
    flash(translate("Logged out of admin mode!"), "is-success")
    return redirect(url_for("home.home"))
