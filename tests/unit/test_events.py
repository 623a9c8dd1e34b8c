"""Tests for the EventSystem."""

from __future__ import annotations

import pytest

from golfoutings.lib.events import SIGNUP_CREATED, EventSystem


def test_emit_calls_handlers_in_registration_order():
    events = EventSystem()
    calls = []

    events.on(SIGNUP_CREATED, lambda signup, event: calls.append(("first", signup, event)))
    events.on(SIGNUP_CREATED, lambda signup, event: calls.append(("second", signup, event)))
    events.emit(SIGNUP_CREATED, "signup", "event")

    assert calls == [("first", "signup", "event"), ("second", "signup", "event")]


def test_emit_passes_kwargs():
    events = EventSystem()
    captured = {}

    events.on("test_event", lambda **kwargs: captured.update(kwargs))
    events.emit("test_event", key="value")

    assert captured == {"key": "value"}


def test_emit_without_handlers_does_nothing():
    events = EventSystem()
    events.on("other_event", lambda message: pytest.fail("wrong handler called"))

    events.emit("nonexistent_event", "message")


def test_handler_exceptions_bubble_up():
    events = EventSystem()

    def failing_handler():
        raise ValueError("Handler failed")

    events.on("test_event", failing_handler)

    with pytest.raises(ValueError, match="Handler failed"):
        events.emit("test_event")
