"""Django ORM implementation of the event and registration stores."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from django.conf import settings
from django.db import DatabaseError, IntegrityError, connection, transaction
from django.db.models import Count

from events import models
from events.domain import (
    Attendee,
    Capacity,
    Event,
    EventId,
    Registration,
    UpcomingEvent,
    User,
    UserId,
)
from events.domain.errors import UnavailableError
from events.stores.interfaces import EventStore, RegistrationStore

logger = logging.getLogger(__name__)


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        title=row.title,
        starts_at=row.starts_at,
        location=row.location,
        capacity=Capacity(row.capacity),
    )


def _to_user(row: models.User) -> User:
    return User(id=UserId(row.pk), name=row.name, email=row.email)


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def create_event(
        self, title: str, starts_at: datetime, location: str, capacity: int
    ) -> Event:
        row = models.Event.objects.create(
            title=title, starts_at=starts_at, location=location, capacity=capacity
        )
        return _to_event(row)

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def list_upcoming_events(self, now: datetime) -> list[UpcomingEvent]:
        rows = (
            models.Event.objects.filter(starts_at__gt=now)
            .annotate(registrations_count=Count("registrations"))
            .order_by("starts_at", "location")
        )
        return [
            UpcomingEvent(event=_to_event(row), registrations_count=row.registrations_count)
            for row in rows
        ]

    def get_attendees(self, event_id: EventId) -> list[Attendee]:
        rows = (
            models.Registration.objects.filter(event_id=event_id.value)
            .select_related("user")
            .order_by("registered_at", "pk")
        )
        return [
            Attendee(
                user_id=UserId(row.user.pk),
                name=row.user.name,
                email=row.user.email,
                registered_at=row.registered_at,
            )
            for row in rows
        ]

    def count_registrations(self, event_id: EventId) -> int:
        return models.Registration.objects.filter(event_id=event_id.value).count()


class DjangoRegistrationStore(RegistrationStore):
    """Registration store serialising each event through its row lock.

    On PostgreSQL a transaction-local ``lock_timeout`` bounds how long a
    request waits behind another holder of the same event row.
    """

    def __init__(self, lock_timeout_ms: int | None = None) -> None:
        if lock_timeout_ms is None:
            lock_timeout_ms = settings.EVENTS_LOCK_TIMEOUT_MS
        self._lock_timeout_ms = lock_timeout_ms

    @contextmanager
    def atomic(self) -> Iterator[None]:
        try:
            with transaction.atomic():
                yield
        except DatabaseError as exc:
            logger.error("Registration transaction failed", exc_info=exc)
            raise UnavailableError() from exc

    def lock_event(self, event_id: EventId) -> Event | None:
        if connection.vendor == "postgresql" and self._lock_timeout_ms:
            with connection.cursor() as cursor:
                cursor.execute(
                    "SELECT set_config('lock_timeout', %s, true)",
                    [f"{self._lock_timeout_ms}ms"],
                )
        row = (
            models.Event.objects.select_for_update()
            .filter(pk=event_id.value)
            .first()
        )
        return _to_event(row) if row is not None else None

    def get_user(self, user_id: UserId) -> User | None:
        row = models.User.objects.filter(pk=user_id.value).first()
        return _to_user(row) if row is not None else None

    def get_or_create_user(self, name: str, email: str) -> User:
        row = models.User.objects.filter(email=email).first()
        if row is not None:
            return _to_user(row)
        try:
            with transaction.atomic():
                row = models.User.objects.create(name=name, email=email)
        except IntegrityError:
            logger.info("User %s created concurrently, re-fetching", email)
            row = models.User.objects.get(email=email)
        return _to_user(row)

    def registration_exists(self, event_id: EventId, user_id: UserId) -> bool:
        return models.Registration.objects.filter(
            event_id=event_id.value, user_id=user_id.value
        ).exists()

    def count_registrations(self, event_id: EventId) -> int:
        return models.Registration.objects.filter(event_id=event_id.value).count()

    def add_registration(
        self, event_id: EventId, user_id: UserId, registered_at: datetime
    ) -> Registration:
        row = models.Registration.objects.create(
            event_id=event_id.value,
            user_id=user_id.value,
            registered_at=registered_at,
        )
        return Registration(
            event_id=event_id, user_id=user_id, registered_at=row.registered_at
        )

    def remove_registration(self, event_id: EventId, user_id: UserId) -> bool:
        deleted, _ = models.Registration.objects.filter(
            event_id=event_id.value, user_id=user_id.value
        ).delete()
        return deleted > 0
