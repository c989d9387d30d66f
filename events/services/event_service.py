"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from events.domain import Event, EventDetails, EventId, EventStats, UpcomingEvent
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    ValidationError,
)
from events.domain.validators import parse_event_datetime, validate_event_payload
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


def parse_event_id(event_id: str) -> EventId:
    """Raises InvalidEventIdError for anything but a positive integer."""
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidEventIdError() from None


class EventService:
    """Service for event creation and read-only lookups."""

    def __init__(self, store: EventStore, clock: Clock = utcnow) -> None:
        self._store = store
        self._clock = clock

    def create_event(self, payload: Mapping[str, Any]) -> Event:
        """Create an event from an API payload.

        Raises:
            ValidationError: If the payload is malformed.
        """
        errors = validate_event_payload(payload)
        if errors:
            raise ValidationError(errors)

        event = self._store.create_event(
            title=payload["title"],
            starts_at=parse_event_datetime(payload["datetime"]),
            location=payload["location"],
            capacity=int(payload["capacity"]),
        )
        logger.info("Created event %s (capacity %s)", event.id.value, event.capacity.value)
        return event

    def get_event_details(self, event_id: str) -> EventDetails:
        """Return an event with its attendees, first registered first.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self._get_event(parse_event_id(event_id))
        attendees = self._store.get_attendees(event.id)
        return EventDetails(event=event, attendees=tuple(attendees))

    def list_upcoming_events(self) -> list[UpcomingEvent]:
        """Return events that have not started yet, soonest first."""
        return self._store.list_upcoming_events(self._clock())

    def event_stats(self, event_id: str) -> EventStats:
        """Return registration totals for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self._get_event(parse_event_id(event_id))
        total = self._store.count_registrations(event.id)
        return EventStats.for_event(event, total)

    def _get_event(self, event_id: EventId) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id.value)
        return event
