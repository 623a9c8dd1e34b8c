"""Minimal event system for decoupling the outing manager from mail delivery."""

from __future__ import annotations

from typing import Any, Callable

# Emitted with (signup, event) after a signup has been persisted
SIGNUP_CREATED = "signup_created"


class EventSystem:
    """Synchronous named-event dispatcher.

    Handlers run in registration order on the emitting call stack;
    exceptions bubble up to the emitter.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Callable[..., Any]]] = {}

    def on(self, event_name: str, handler: Callable[..., Any]) -> None:
        """Register a handler for an event."""
        self._handlers.setdefault(event_name, []).append(handler)

    def emit(self, event_name: str, *args: Any, **kwargs: Any) -> None:
        """Call all handlers registered for this event."""
        for handler in self._handlers.get(event_name, []):
            handler(*args, **kwargs)
