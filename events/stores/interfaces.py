"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from events.domain import (
    Attendee,
    Event,
    EventId,
    Registration,
    UpcomingEvent,
    User,
    UserId,
)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def create_event(
        self, title: str, starts_at: datetime, location: str, capacity: int
    ) -> Event:
        """Insert a new event and return it with its assigned ID."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_upcoming_events(self, now: datetime) -> list[UpcomingEvent]:
        """Return events starting strictly after now.

        Ordered by start time ascending, then location ascending.
        """
        ...

    @abstractmethod
    def get_attendees(self, event_id: EventId) -> list[Attendee]:
        """Return registered users for an event, first registered first."""
        ...

    @abstractmethod
    def count_registrations(self, event_id: EventId) -> int:
        ...


class RegistrationStore(ABC):
    """Interface for the transactional side of registrations.

    Every other method must be called inside ``atomic()``. Locks taken by
    ``lock_event`` are held until the block exits. Leaving the block with an
    exception rolls back all writes made inside it.
    """

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Open a transaction.

        Raises:
            UnavailableError: If the datastore fails while inside the block
                or while committing.
        """
        ...

    @abstractmethod
    def lock_event(self, event_id: EventId) -> Event | None:
        """Take an exclusive lock on the event, or return None if absent."""
        ...

    @abstractmethod
    def get_user(self, user_id: UserId) -> User | None:
        ...

    @abstractmethod
    def get_or_create_user(self, name: str, email: str) -> User:
        """Return the user with this email, creating it if needed.

        A concurrent creation of the same email is not an error; the
        winner's row is returned.
        """
        ...

    @abstractmethod
    def registration_exists(self, event_id: EventId, user_id: UserId) -> bool:
        ...

    @abstractmethod
    def count_registrations(self, event_id: EventId) -> int:
        ...

    @abstractmethod
    def add_registration(
        self, event_id: EventId, user_id: UserId, registered_at: datetime
    ) -> Registration:
        ...

    @abstractmethod
    def remove_registration(self, event_id: EventId, user_id: UserId) -> bool:
        """Delete the registration. Return False if there was none."""
        ...
