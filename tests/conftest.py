"""Pytest fixtures for Golf Outings tests."""

from __future__ import annotations

import smtplib

import pytest

from golfoutings.app import create_app
from golfoutings.config import ConfigType
from golfoutings.lib.record_store import RecordStore

MAIL_SETTINGS = {"MAIL_USERNAME": "outings@example.com", "MAIL_PASSWORD": "app-password"}


class FakeMail:
    """Stand-in for the Flask-Mail transport that records messages instead of sending them.

    Recipients listed in `fail_for` are refused the way an SMTP server would.
    """

    def __init__(self, fail_for=()):
        self.outbox = []
        self.attempts = 0
        self.fail_for = set(fail_for)

    def send(self, message):
        self.attempts += 1
        refused = set(message.recipients) & self.fail_for
        if refused:
            raise smtplib.SMTPRecipientsRefused({r: (550, b"mailbox unavailable") for r in refused})
        self.outbox.append(message)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def store(db_path):
    """An initialized store backed by a file in a temp directory."""
    s = RecordStore(str(db_path))
    s.initialize()
    return s


@pytest.fixture
def fake_mail():
    return FakeMail()


@pytest.fixture
def app(store, fake_mail):
    """App with mail credentials unset, so sending is disabled."""
    return create_app(ConfigType.TESTING, store=store, mail=fake_mail)


@pytest.fixture
def mail_app(store, fake_mail):
    """App with mail credentials set, delivering into `fake_mail`."""
    return create_app(ConfigType.TESTING, store=store, mail=fake_mail, **MAIL_SETTINGS)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    """Test client whose session already carries the admin flag."""
    c = app.test_client()
    with c.session_transaction() as sess:
        sess["admin"] = True
    return c


@pytest.fixture
def mail_admin_client(mail_app):
    c = mail_app.test_client()
    with c.session_transaction() as sess:
        sess["admin"] = True
    return c


@pytest.fixture
def failing_mail():
    """Transport that refuses bad@example.com and delivers everything else."""
    return FakeMail(fail_for={"bad@example.com"})
