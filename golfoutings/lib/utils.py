from datetime import datetime

import flask_babel

translate = flask_babel.gettext
"""Alias for the gettext function from Flask-Babel

This is used for marking strings for translation in the application.

Example usage:
    message = translate("This is a translatable string")
"""


def format_date(value: str | None) -> str:
    """Format an event date/time for display, e.g. `May 1, 2024 at 8:00 AM`

    Event dates are stored as submitted by the event form (`2024-05-01T08:00`).
    Values that don't parse as ISO-8601 are returned unchanged.

    Args:
        value (str | None): The stored date string.

    Returns:
        str: The human readable date, or the input if it can't be parsed.
    """
    if not value:
        return ""
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    hour = dt.hour % 12 or 12
    return f"{dt:%B} {dt.day}, {dt.year} at {hour}:{dt:%M} {dt:%p}"
