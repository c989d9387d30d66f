"""Domain error codes for the events module.

Errors are grouped by kind. Handlers map the kind to a transport status;
every message here is safe to show to a client.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    MISSING_USER_ID = "MISSING_USER_ID"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    PAST_EVENT = "PAST_EVENT"
    EVENT_FULL = "EVENT_FULL"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Malformed or missing input."""


class NotFoundError(DomainError):
    """A referenced event, user or registration does not exist."""


class InvalidStateError(DomainError):
    """The request is well-formed but violates a business rule."""


class ConflictError(DomainError):
    """The request would duplicate existing state."""


class ValidationError(InvalidInputError):
    """Raised when a payload fails validation.

    Carries every validation message, not just the first one.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Validation failed",
        )
        self.errors = tuple(errors)


class InvalidEventIdError(InvalidInputError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event id",
        )


class MissingUserIdError(InvalidInputError):
    """Raised when a cancellation does not name a user."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_USER_ID,
            message="userId is required",
        )


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class UserNotFoundError(NotFoundError):
    """Raised when a registration references an unknown user."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
        )
        self.user_id = user_id


class RegistrationNotFoundError(NotFoundError):
    """Raised when cancelling a registration that does not exist."""

    def __init__(self, event_id: int, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_NOT_FOUND,
            message="Registration not found for this user and event",
        )
        self.event_id = event_id
        self.user_id = user_id


class PastEventError(InvalidStateError):
    """Raised when registering for an event that has already started."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.PAST_EVENT,
            message="Cannot register for past events",
        )
        self.event_id = event_id


class EventFullError(InvalidStateError):
    """Raised when an event has no remaining capacity."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FULL,
            message="Event is full",
        )
        self.event_id = event_id


class AlreadyRegisteredError(ConflictError):
    """Raised when a user is already registered for the event."""

    def __init__(self, event_id: int, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="User already registered for this event",
        )
        self.event_id = event_id
        self.user_id = user_id


class UnavailableError(DomainError):
    """Raised when the datastore fails. The operation is safe to retry."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNAVAILABLE,
            message="Service temporarily unavailable",
        )
