"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import Capacity, EventId, Percentage, UserId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    starts_at: datetime
    location: str
    capacity: Capacity

    def has_started(self, now: datetime) -> bool:
        """An event at exactly ``now`` counts as started."""
        return self.starts_at <= now


@dataclass(frozen=True)
class User:
    """Domain representation of a User."""

    id: UserId
    name: str
    email: str


@dataclass(frozen=True)
class Registration:
    """Domain representation of a Registration."""

    event_id: EventId
    user_id: UserId
    registered_at: datetime


@dataclass(frozen=True)
class Attendee:
    """A registered user as listed on the event details."""

    user_id: UserId
    name: str
    email: str
    registered_at: datetime


@dataclass(frozen=True)
class EventDetails:
    event: Event
    attendees: tuple[Attendee, ...] = ()


@dataclass(frozen=True)
class UpcomingEvent:
    event: Event
    registrations_count: int


@dataclass(frozen=True)
class EventStats:
    """Registration totals for one event.

    remaining_capacity is reported as-is and goes negative if rows were
    inserted outside the registration workflow.
    """

    event_id: EventId
    total_registrations: int
    remaining_capacity: int
    percentage_capacity_used: Percentage

    @classmethod
    def for_event(cls, event: Event, total_registrations: int) -> "EventStats":
        capacity = event.capacity.value
        return cls(
            event_id=event.id,
            total_registrations=total_registrations,
            remaining_capacity=capacity - total_registrations,
            percentage_capacity_used=Percentage.of(total_registrations, capacity),
        )


@dataclass(frozen=True)
class RegistrationResult:
    user_id: UserId
    event_id: EventId
    success: bool = True
