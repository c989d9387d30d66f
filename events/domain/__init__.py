from events.domain.models import (
    Attendee,
    Event,
    EventDetails,
    EventStats,
    Registration,
    RegistrationResult,
    UpcomingEvent,
    User,
)
from events.domain.value_objects import Capacity, EventId, Percentage, UserId

__all__ = [
    "Attendee",
    "Event",
    "EventDetails",
    "EventStats",
    "Registration",
    "RegistrationResult",
    "UpcomingEvent",
    "User",
    "EventId",
    "UserId",
    "Capacity",
    "Percentage",
]
