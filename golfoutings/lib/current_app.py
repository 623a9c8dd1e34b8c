from functools import wraps

from flask import current_app, redirect, session, url_for

from golfoutings.lib.outing_manager import OutingManager
from golfoutings.lib.session_auth import SessionAuthorizer


def get_outing_manager() -> OutingManager:
    """Get the current app's OutingManager instance
    Returns:
        OutingManager: The OutingManager instance attached to the current app.
    """
    return current_app.outing_manager


def get_authorizer() -> SessionAuthorizer:
    """Get the current app's SessionAuthorizer instance
    Returns:
        SessionAuthorizer: The SessionAuthorizer instance attached to the current app.
    """
    return current_app.authorizer


def is_admin() -> bool:
    """Determine if the current request's session carries the admin flag
    Returns:
        bool: `True` if the session has been marked as admin by a successful login.
    """
    return get_authorizer().is_authorized(session)


def admin_required(view):
    """Route decorator: send anyone without an admin session to the login page."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if not is_admin():
            return redirect(url_for("auth.login"))
        return view(*args, **kwargs)

    return wrapper
