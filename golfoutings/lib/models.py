"""Records kept in the golf outings store.

Field names are snake_case in Python; the JSON document keeps the keys the
stored file has always used (``eventId`` on signups).
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid.uuid4())


def utc_timestamp(now: datetime | None = None) -> str:
    """Format a UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix.

    Sub-millisecond time is rounded up, so the stamp is never earlier than ``now``.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    remainder = now.microsecond % 1000
    if remainder:
        now += timedelta(microseconds=1000 - remainder)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Inverse of :func:`utc_timestamp`."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _optional(value: Any) -> str | None:
    # Empty form fields are stored as absent
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class Event:
    """A golf outing published for sign-up."""

    id: str
    title: str
    date: str
    location: str
    description: str | None = None

    @classmethod
    def create(
        cls, title: str, date: str, location: str, description: str | None = None
    ) -> Event:
        return cls(
            id=new_id(),
            title=title.strip(),
            date=date.strip(),
            location=location.strip(),
            description=_optional(description),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "location": self.location,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Event:
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            date=data.get("date", ""),
            location=data.get("location", ""),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class Signup:
    """One participant's registration for an event.

    ``event_id`` is not checked against the events collection once stored,
    so a signup may outlive its event.
    """

    id: str
    event_id: str
    name: str
    email: str
    timestamp: str
    phone: str | None = None
    handicap: str | None = None
    notes: str | None = None

    @classmethod
    def create(
        cls,
        event_id: str,
        name: str,
        email: str,
        phone: str | None = None,
        handicap: str | None = None,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> Signup:
        return cls(
            id=new_id(),
            event_id=event_id,
            name=name.strip(),
            email=email.strip(),
            timestamp=utc_timestamp(now),
            phone=_optional(phone),
            handicap=_optional(handicap),
            notes=_optional(notes),
        )

    @property
    def created_at(self) -> datetime:
        return parse_timestamp(self.timestamp)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "eventId": self.event_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "handicap": self.handicap,
            "notes": self.notes,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Signup:
        return cls(
            id=data["id"],
            event_id=data.get("eventId", ""),
            name=data.get("name", ""),
            email=data.get("email", ""),
            timestamp=data.get("timestamp", ""),
            phone=data.get("phone"),
            handicap=data.get("handicap"),
            notes=data.get("notes"),
        )
