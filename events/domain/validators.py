"""Payload validators for API input.

Each validator returns a list of human-readable messages; an empty list
means the payload is acceptable. They never raise.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from events.domain.value_objects import MAX_CAPACITY

# Column widths in events/models.py
MAX_TEXT_LENGTH = 255
MAX_EMAIL_LENGTH = 254


def parse_event_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC.

    Values that cannot be expressed in UTC are rejected like unparseable ones.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        return None
    return parsed


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _check_text(
    errors: list[str], payload: Mapping[str, Any], field: str, max_length: int
) -> bool:
    value = payload.get(field)
    if not _is_non_empty_string(value):
        return False
    if len(value) > max_length:
        errors.append(f"{field} must be at most {max_length} characters")
    return True


def validate_event_payload(payload: Mapping[str, Any]) -> list[str]:
    errors = []
    if not _check_text(errors, payload, "title", MAX_TEXT_LENGTH):
        errors.append("title is required and must be a string")
    if parse_event_datetime(payload.get("datetime")) is None:
        errors.append("datetime is required and must be in ISO format")
    if not _check_text(errors, payload, "location", MAX_TEXT_LENGTH):
        errors.append("location is required and must be a string")

    capacity = payload.get("capacity")
    if not _is_number(capacity):
        errors.append("capacity is required and must be a number")
    else:
        fractional = isinstance(capacity, float) and not capacity.is_integer()
        if fractional or capacity <= 0:
            errors.append("capacity must be a positive integer")
        if capacity > MAX_CAPACITY:
            errors.append(f"capacity must be <= {MAX_CAPACITY}")
    return errors


def validate_user_payload(payload: Mapping[str, Any]) -> list[str]:
    errors = []
    if not _check_text(errors, payload, "name", MAX_TEXT_LENGTH):
        errors.append("name is required and must be a string")
    email = payload.get("email")
    if not _is_non_empty_string(email) or "@" not in email:
        errors.append("email is required and must be a valid email string")
    elif len(email) > MAX_EMAIL_LENGTH:
        errors.append(f"email must be at most {MAX_EMAIL_LENGTH} characters")
    return errors
