"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models
from django.utils import timezone


class Event(models.Model):
    """Persistence model for events."""

    title = models.CharField(max_length=255)
    starts_at = models.DateTimeField(db_column="datetime")
    location = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["starts_at", "location"]
        indexes = [
            models.Index(
                fields=["starts_at", "location"], name="events_event_starts_loc_idx"
            ),
        ]

    def __str__(self) -> str:
        return self.title


class User(models.Model):
    """Persistence model for users registering to events."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.email


class Registration(models.Model):
    """Persistence model linking one user to one event."""

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="registrations"
    )
    user = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="registrations"
    )
    registered_at = models.DateTimeField(default=timezone.now)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["event", "user"], name="unique_event_registration"
            ),
        ]
        indexes = [
            models.Index(
                fields=["event", "registered_at"], name="events_reg_event_time_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} @ {self.event_id}"
