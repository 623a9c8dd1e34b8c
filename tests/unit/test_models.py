"""Unit tests for the Event and Signup records."""

from datetime import datetime, timezone

from golfoutings.lib.models import Event, Signup, parse_timestamp, utc_timestamp


class TestEvent:
    def test_create_assigns_unique_ids(self):
        a = Event.create("Spring Scramble", "2024-05-01T08:00", "Pine Hills")
        b = Event.create("Spring Scramble", "2024-05-01T08:00", "Pine Hills")
        assert a.id != b.id

    def test_create_strips_fields_and_drops_blank_description(self):
        event = Event.create("  Spring Scramble ", "2024-05-01T08:00", " Pine Hills", "   ")
        assert event.title == "Spring Scramble"
        assert event.location == "Pine Hills"
        assert event.description is None

    def test_dict_round_trip(self):
        event = Event.create("Spring Scramble", "2024-05-01T08:00", "Pine Hills", "Shotgun start")
        assert Event.from_dict(event.to_dict()) == event


class TestSignup:
    def test_create_sets_reference_and_optional_fields(self):
        signup = Signup.create("event-1", "Jo", "jo@example.com", phone="", handicap="12")
        assert signup.event_id == "event-1"
        assert signup.phone is None
        assert signup.handicap == "12"
        assert signup.notes is None

    def test_to_dict_uses_stored_key_names(self):
        signup = Signup.create("event-1", "Jo", "jo@example.com")
        data = signup.to_dict()
        assert data["eventId"] == "event-1"
        assert "event_id" not in data

    def test_from_dict_missing_optionals(self):
        signup = Signup.from_dict(
            {
                "id": "s1",
                "eventId": "e1",
                "name": "Jo",
                "email": "jo@example.com",
                "timestamp": "2024-05-01T12:00:00.000Z",
                "extra": "ignored",
            }
        )
        assert signup.phone is None
        assert signup.handicap is None
        assert signup.created_at == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)


class TestTimestamps:
    def test_utc_timestamp_format(self):
        now = datetime(2024, 5, 1, 8, 30, 15, 123000, tzinfo=timezone.utc)
        assert utc_timestamp(now) == "2024-05-01T08:30:15.123Z"

    def test_utc_timestamp_rounds_up_partial_milliseconds(self):
        now = datetime(2024, 5, 1, 8, 30, 15, 123001, tzinfo=timezone.utc)
        assert utc_timestamp(now) == "2024-05-01T08:30:15.124Z"

    def test_utc_timestamp_rounds_into_next_second(self):
        now = datetime(2024, 5, 1, 8, 30, 59, 999500, tzinfo=timezone.utc)
        assert utc_timestamp(now) == "2024-05-01T08:31:00.000Z"

    def test_stamp_is_never_earlier_than_now(self):
        for _ in range(200):
            now = datetime.now(timezone.utc)
            assert parse_timestamp(utc_timestamp(now)) >= now

    def test_parse_timestamp(self):
        assert parse_timestamp("2024-05-01T08:30:15.123Z") == datetime(
            2024, 5, 1, 8, 30, 15, 123000, tzinfo=timezone.utc
        )
