from events.handlers.views import (
    EventDetailView,
    EventListView,
    EventRegistrationView,
    EventStatsView,
    HealthView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventRegistrationView",
    "EventStatsView",
    "HealthView",
]
