"""Plain-text email bodies sent to participants."""

from __future__ import annotations

from golfoutings.constants import TEAM_SIGNATURE
from golfoutings.lib.models import Event, Signup
from golfoutings.lib.utils import format_date


def confirmation_subject(event: Event) -> str:
    return f"Confirmation: {event.title}"


def confirmation_body(signup: Signup, event: Event) -> str:
    return (
        f"Hello {signup.name},\n\n"
        f"Thank you for signing up for the {event.title} on {format_date(event.date)} "
        f"at {event.location}.\n\n"
        "We look forward to seeing you!\n\n"
        f"- {TEAM_SIGNATURE}"
    )


def reminder_subject(event: Event) -> str:
    return f"Reminder: {event.title}"


def reminder_body(signup: Signup, event: Event) -> str:
    return (
        f"Hello {signup.name},\n\n"
        f"This is a reminder for the upcoming {event.title} on {format_date(event.date)} "
        f"at {event.location}.\n\n"
        "We hope to see you there!\n\n"
        f"- {TEAM_SIGNATURE}"
    )
