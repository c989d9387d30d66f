"""Registration workflow: register and cancel under a per-event lock.

Each operation is one transaction that starts by locking the event row.
Registrations and cancellations on the same event are therefore applied
one at a time, which keeps the capacity check and the insert atomic.
Operations on different events do not block each other.
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import RegistrationResult, User, UserId
from events.domain.errors import (
    AlreadyRegisteredError,
    DomainError,
    EventFullError,
    EventNotFoundError,
    MissingUserIdError,
    PastEventError,
    RegistrationNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from events.domain.validators import validate_user_payload
from events.services.event_service import Clock, parse_event_id, utcnow
from events.stores.interfaces import RegistrationStore

logger = logging.getLogger(__name__)


def _parse_user_id(value: Any) -> UserId:
    try:
        return UserId.from_value(value)
    except ValueError:
        raise ValidationError(["userId must be a positive integer"]) from None


def _is_blank(value: Any) -> bool:
    """None, false, 0 and "" all mean no userId was given."""
    return value is None or (isinstance(value, (bool, int, float, str)) and not value)


class RegistrationService:
    """Service for registering users to events and cancelling them."""

    def __init__(self, store: RegistrationStore, clock: Clock = utcnow) -> None:
        self._store = store
        self._clock = clock

    def register_user(
        self, event_id: str, payload: Mapping[str, Any]
    ) -> RegistrationResult:
        """Register an existing user (``userId``) or a new one (``name``, ``email``).

        A user given by name and email is looked up by email and created
        if absent.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
            PastEventError: If the event has already started.
            UserNotFoundError: If ``userId`` does not reference a user.
            ValidationError: If the user payload is malformed.
            AlreadyRegisteredError: If the user is already registered.
            EventFullError: If the event has no remaining capacity.
            UnavailableError: If the datastore fails; safe to retry.
        """
        eid = parse_event_id(event_id)
        try:
            with self._store.atomic():
                event = self._store.lock_event(eid)
                if event is None:
                    raise EventNotFoundError(eid.value)

                now = self._clock()
                if event.has_started(now):
                    raise PastEventError(eid.value)

                user = self._resolve_user(payload)

                if self._store.registration_exists(eid, user.id):
                    raise AlreadyRegisteredError(eid.value, user.id.value)
                if self._store.count_registrations(eid) >= event.capacity.value:
                    raise EventFullError(eid.value)

                self._store.add_registration(eid, user.id, now)
        except DomainError as exc:
            logger.info("Registration for event %s failed: %s", eid.value, exc)
            raise

        logger.info("User %s registered for event %s", user.id.value, eid.value)
        return RegistrationResult(user_id=user.id, event_id=eid)

    def cancel_registration(self, event_id: str, user_id: Any) -> None:
        """Remove a user's registration for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            MissingUserIdError: If no user_id is given.
            ValidationError: If user_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
            RegistrationNotFoundError: If the user is not registered.
            UnavailableError: If the datastore fails; safe to retry.
        """
        eid = parse_event_id(event_id)
        if _is_blank(user_id):
            raise MissingUserIdError()
        uid = _parse_user_id(user_id)

        try:
            with self._store.atomic():
                if self._store.lock_event(eid) is None:
                    raise EventNotFoundError(eid.value)
                if not self._store.remove_registration(eid, uid):
                    raise RegistrationNotFoundError(eid.value, uid.value)
        except DomainError as exc:
            logger.info("Cancellation for event %s failed: %s", eid.value, exc)
            raise

        logger.info("User %s cancelled registration for event %s", uid.value, eid.value)

    def _resolve_user(self, payload: Mapping[str, Any]) -> User:
        user_id = payload.get("userId")
        if not _is_blank(user_id):
            uid = _parse_user_id(user_id)
            user = self._store.get_user(uid)
            if user is None:
                raise UserNotFoundError(uid.value)
            return user

        errors = validate_user_payload(payload)
        if errors:
            raise ValidationError(errors)
        return self._store.get_or_create_user(payload["name"], payload["email"])
