"""Tests for the SessionAuthorizer."""

from golfoutings.lib.session_auth import ADMIN_SESSION_KEY, SessionAuthorizer


def _authorizer():
    return SessionAuthorizer("admin", "secret")


def test_login_with_matching_credentials_sets_flag():
    session = {}
    assert _authorizer().login(session, "admin", "secret") is True
    assert session[ADMIN_SESSION_KEY] is True


def test_login_rejects_wrong_password():
    session = {}
    assert _authorizer().login(session, "admin", "wrong") is False
    assert session == {}


def test_login_rejects_wrong_username():
    session = {}
    assert _authorizer().login(session, "root", "secret") is False
    assert ADMIN_SESSION_KEY not in session


def test_login_rejects_missing_fields():
    assert _authorizer().login({}, None, None) is False


def test_is_authorized_only_with_flag():
    auth = _authorizer()
    assert auth.is_authorized({}) is False
    assert auth.is_authorized({ADMIN_SESSION_KEY: "yes"}) is False
    assert auth.is_authorized({ADMIN_SESSION_KEY: True}) is True


def test_logout_clears_everything():
    auth = _authorizer()
    session = {"lang": "en"}
    auth.login(session, "admin", "secret")

    auth.logout(session)

    assert session == {}
    assert auth.is_authorized(session) is False


def test_logout_of_anonymous_session_is_harmless():
    session = {}
    _authorizer().logout(session)
    assert session == {}
