"""Outbound email for confirmations and bulk reminders."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

import gevent
from flask import Flask
from flask_mail import Mail, Message

T = TypeVar("T")


def _email_address(recipient: Any) -> str:
    """Accept either a bare address or a record with an ``email`` attribute."""
    return recipient if isinstance(recipient, str) else recipient.email


class NotificationGateway:
    """Sends email through Flask-Mail, or does nothing when mail isn't configured.

    Sending is enabled only when both MAIL_USERNAME and MAIL_PASSWORD are set.
    There is no batching, retry or rate limiting: each recipient gets one
    SMTP send attempt.
    """

    def __init__(self, app: Flask | None = None, mail: Mail | None = None) -> None:
        """Initialize the gateway, optionally binding it to an app right away.

        Args:
            app: Flask app whose config holds the MAIL_* settings.
            mail: Transport to send with. Defaults to a Flask-Mail instance for `app`.
        """
        self._app: Flask | None = None
        self._mail = mail
        self._username: str | None = None
        self._password: str | None = None
        self._sender: str | None = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        self._app = app
        if self._mail is None:
            self._mail = Mail(app)
        self._username = app.config.get("MAIL_USERNAME")
        self._password = app.config.get("MAIL_PASSWORD")
        self._sender = app.config.get("MAIL_DEFAULT_SENDER") or self._username

        if not self.is_configured:
            logging.warning("EMAIL_USER or EMAIL_PASS not set. Emails will not be sent.")

    @property
    def is_configured(self) -> bool:
        return bool(self._username and self._password)

    def send_one(self, recipient: str, subject: str, body: str) -> bool:
        """Send a single message.

        Returns False without attempting delivery if mail isn't configured.
        Transport errors are raised to the caller.
        """
        if not self.is_configured:
            logging.debug(f"Mail disabled, not sending '{subject}' to {recipient}")
            return False

        with self._app.app_context():
            msg = Message(subject=subject, recipients=[recipient], body=body, sender=self._sender)
            self._mail.send(msg)
        logging.info(f"Sent '{subject}' to {recipient}")
        return True

    def send_many(
        self,
        recipients: Iterable[T],
        subject_for: Callable[[T], str],
        body_for: Callable[[T], str],
    ) -> int:
        """Send one message per recipient and return how many were delivered.

        A failed recipient is logged and skipped. When mail isn't configured
        nothing is attempted and the count is 0.
        """
        if not self.is_configured:
            return 0

        sent = 0
        for recipient in recipients:
            address = _email_address(recipient)
            try:
                if self.send_one(address, subject_for(recipient), body_for(recipient)):
                    sent += 1
            except Exception as e:
                logging.error(f"Failed to send mail to {address}: {e}")
        return sent

    def send_detached(self, recipient: str, subject: str, body: str) -> gevent.Greenlet:
        """Send in a background greenlet. Failures are logged, never raised.

        The caller doesn't wait; the greenlet is returned so it can be joined.
        """
        return gevent.spawn(self._send_and_log, recipient, subject, body)

    def _send_and_log(self, recipient: str, subject: str, body: str) -> None:
        try:
            self.send_one(recipient, subject, body)
        except Exception as e:
            logging.error(f"Error sending '{subject}' to {recipient}: {e}")
