"""Unit tests for domain primitives and payload validators.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from events.domain import Capacity, Event, EventId, EventStats, Percentage, UserId
from events.domain.errors import EventFullError, ValidationError
from events.domain.validators import (
    parse_event_datetime,
    validate_event_payload,
    validate_user_payload,
)


def make_event(capacity: int, starts_at: datetime | None = None) -> Event:
    return Event(
        id=EventId(1),
        title="Launch",
        starts_at=starts_at or datetime(2030, 1, 1, tzinfo=UTC),
        location="HQ",
        capacity=Capacity(capacity),
    )


VALID_EVENT = {
    "title": "Launch",
    "datetime": "2030-01-01T10:00:00Z",
    "location": "HQ",
    "capacity": 10,
}


class TestCapacity:
    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestEventId:
    def test_from_string_valid_integer(self):
        assert EventId.from_string("42") == EventId(42)

    @pytest.mark.parametrize(
        "raw", ["abc", "", "-1", "1.5", "0", "12abc", "\u0661", str(2**63)]
    )
    def test_from_string_rejects_invalid_ids(self, raw):
        with pytest.raises(ValueError):
            EventId.from_string(raw)


class TestUserId:
    def test_from_value_accepts_int_and_digit_string(self):
        assert UserId.from_value(7) == UserId.from_value("7") == UserId(7)

    @pytest.mark.parametrize("raw", [True, 1.0, "x", [1], 0, 10**30, "\u0661"])
    def test_from_value_rejects_other_types(self, raw):
        with pytest.raises(ValueError):
            UserId.from_value(raw)


class TestPercentage:
    def test_zero_whole_is_zero(self):
        assert Percentage.of(5, 0).value == Decimal("0")

    def test_rounds_half_up_to_two_places(self):
        assert Percentage.of(1, 3).value == Decimal("33.33")
        assert Percentage.of(2, 3).value == Decimal("66.67")
        assert Percentage.of(1, 8).value == Decimal("12.50")


class TestEvent:
    def test_event_starting_now_has_started(self):
        now = datetime(2030, 1, 1, tzinfo=UTC)
        assert make_event(10, starts_at=now).has_started(now)
        assert not make_event(10, starts_at=now + timedelta(seconds=1)).has_started(now)


class TestEventStats:
    def test_stats_for_partially_filled_event(self):
        stats = EventStats.for_event(make_event(4), total_registrations=1)
        assert stats.remaining_capacity == 3
        assert float(stats.percentage_capacity_used) == 25.0

    def test_zero_capacity_reports_zero_percent(self):
        stats = EventStats.for_event(make_event(0), total_registrations=0)
        assert float(stats.percentage_capacity_used) == 0.0

    def test_overfilled_event_reports_negative_remaining(self):
        stats = EventStats.for_event(make_event(2), total_registrations=3)
        assert stats.remaining_capacity == -1


class TestErrors:
    def test_validation_error_keeps_all_messages(self):
        error = ValidationError(["a", "b"])
        assert error.errors == ("a", "b")

    def test_str_includes_code(self):
        assert str(EventFullError(1)) == "EVENT_FULL: Event is full"


class TestValidateEventPayload:
    def test_valid_payload_has_no_errors(self):
        assert validate_event_payload(VALID_EVENT) == []

    def test_empty_payload_reports_every_field(self):
        assert validate_event_payload({}) == [
            "title is required and must be a string",
            "datetime is required and must be in ISO format",
            "location is required and must be a string",
            "capacity is required and must be a number",
        ]

    def test_capacity_above_limit(self):
        errors = validate_event_payload({**VALID_EVENT, "capacity": 2000})
        assert errors == ["capacity must be <= 1000"]

    @pytest.mark.parametrize("capacity", [0, -3, 2.5])
    def test_capacity_must_be_positive_integer(self, capacity):
        errors = validate_event_payload({**VALID_EVENT, "capacity": capacity})
        assert errors == ["capacity must be a positive integer"]

    @pytest.mark.parametrize("capacity", ["10", True, None])
    def test_capacity_must_be_a_number(self, capacity):
        errors = validate_event_payload({**VALID_EVENT, "capacity": capacity})
        assert errors == ["capacity is required and must be a number"]

    def test_title_longer_than_column(self):
        errors = validate_event_payload({**VALID_EVENT, "title": "t" * 256})
        assert errors == ["title must be at most 255 characters"]

    def test_location_at_column_width_is_accepted(self):
        assert validate_event_payload({**VALID_EVENT, "location": "l" * 255}) == []

    def test_unparseable_datetime(self):
        errors = validate_event_payload({**VALID_EVENT, "datetime": "next tuesday"})
        assert errors == ["datetime is required and must be in ISO format"]


class TestParseEventDatetime:
    def test_naive_value_is_utc(self):
        assert parse_event_datetime("2030-01-01T10:00:00") == datetime(
            2030, 1, 1, 10, tzinfo=UTC
        )

    def test_offset_is_preserved(self):
        parsed = parse_event_datetime("2030-01-01T10:00:00+02:00")
        assert parsed.utcoffset() == timezone(timedelta(hours=2)).utcoffset(None)

    @pytest.mark.parametrize(
        "raw", ["9999-12-31T23:59:59-05:00", "0001-01-01T00:00:00+01:00"]
    )
    def test_value_outside_utc_range_is_rejected(self, raw):
        assert parse_event_datetime(raw) is None
        assert validate_event_payload({**VALID_EVENT, "datetime": raw}) == [
            "datetime is required and must be in ISO format"
        ]

    def test_non_string_is_rejected(self):
        assert parse_event_datetime(1234) is None


class TestValidateUserPayload:
    def test_valid_user(self):
        assert validate_user_payload({"name": "Ada", "email": "ada@example.com"}) == []

    def test_email_without_at_sign(self):
        errors = validate_user_payload({"name": "Ada", "email": "ada.example.com"})
        assert errors == ["email is required and must be a valid email string"]

    def test_missing_fields(self):
        assert len(validate_user_payload({})) == 2

    def test_name_longer_than_column(self):
        errors = validate_user_payload({"name": "n" * 300, "email": "ada@example.com"})
        assert errors == ["name must be at most 255 characters"]

    def test_email_longer_than_column(self):
        email = "a" * 250 + "@example.com"
        errors = validate_user_payload({"name": "Ada", "email": email})
        assert errors == ["email must be at most 254 characters"]
