"""Event and signup management for golf outings.

Validates form input, reads and writes the record store, and hands
participant mail to the notification gateway.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from golfoutings.lib import mail_templates
from golfoutings.lib.errors import EventNotFoundError, ValidationError
from golfoutings.lib.events import SIGNUP_CREATED, EventSystem
from golfoutings.lib.models import Event, Signup
from golfoutings.lib.notification_gateway import NotificationGateway
from golfoutings.lib.record_store import RecordStore

SIGNUP_REQUIRED_MESSAGE = "Name and Email are required."
EVENT_REQUIRED_MESSAGE = "Title, date and location are required."


@dataclass(frozen=True)
class EventSignups:
    """An event together with the signups referencing it."""

    event: Event
    signups: list[Signup] = field(default_factory=list)


def _missing_fields(**fields: str | None) -> list[str]:
    return [name for name, value in fields.items() if not (value and value.strip())]


class OutingManager:
    """Public signup flow and admin event management on top of the record store."""

    def __init__(
        self,
        store: RecordStore,
        gateway: NotificationGateway,
        events: EventSystem | None = None,
    ) -> None:
        self._store = store
        self._gateway = gateway
        self._events = events or EventSystem()

        self._events.on(SIGNUP_CREATED, self._send_confirmation)

    def list_events(self) -> list[Event]:
        return list(self._store.reload().events)

    def get_event(self, event_id: str) -> Event:
        """Return the event with this id.

        Raises:
            EventNotFoundError: If no stored event has the id.
        """
        event = self._store.reload().find_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(
        self,
        title: str | None,
        date: str | None,
        location: str | None,
        description: str | None = None,
    ) -> Event:
        """Validate and store a new event.

        Raises:
            ValidationError: If title, date or location is empty.
        """
        missing = _missing_fields(title=title, date=date, location=location)
        if missing:
            raise ValidationError(EVENT_REQUIRED_MESSAGE, missing)

        return self._store.add_event(Event.create(title, date, location, description))

    def create_signup(
        self,
        event_id: str,
        name: str | None,
        email: str | None,
        phone: str | None = None,
        handicap: str | None = None,
        notes: str | None = None,
    ) -> tuple[Event, Signup]:
        """Register a participant for an event.

        The confirmation email is sent in the background after the signup is
        stored; its outcome never reaches the caller.

        Raises:
            EventNotFoundError: If the event doesn't exist.
            ValidationError: If name or email is empty.
        """
        event = self.get_event(event_id)

        missing = _missing_fields(name=name, email=email)
        if missing:
            raise ValidationError(SIGNUP_REQUIRED_MESSAGE, missing)

        signup = self._store.add_signup(
            Signup.create(event.id, name, email, phone=phone, handicap=handicap, notes=notes)
        )
        self._events.emit(SIGNUP_CREATED, signup, event)
        return event, signup

    def grouped_signups(self) -> list[EventSignups]:
        """Every event with its signups, in event creation order."""
        snapshot = self._store.reload()
        return [
            EventSignups(event, snapshot.signups_for_event(event.id)) for event in snapshot.events
        ]

    def notify_participants(self, event_id: str) -> int:
        """Send a reminder to everyone signed up for the event.

        Blocks until every recipient has been attempted. Nothing is written
        to the store.

        Returns:
            The number of reminders delivered.

        Raises:
            EventNotFoundError: If the event doesn't exist.
        """
        snapshot = self._store.reload()
        event = snapshot.find_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        signups = snapshot.signups_for_event(event_id)
        sent = self._gateway.send_many(
            signups,
            lambda signup: mail_templates.reminder_subject(event),
            lambda signup: mail_templates.reminder_body(signup, event),
        )
        logging.info(f"Sent {sent} of {len(signups)} reminders for event {event_id}")
        return sent

    def _send_confirmation(self, signup: Signup, event: Event) -> None:
        self._gateway.send_detached(
            signup.email,
            mail_templates.confirmation_subject(event),
            mail_templates.confirmation_body(signup, event),
        )
