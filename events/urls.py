from django.urls import re_path

from events.handlers import (
    EventDetailView,
    EventListView,
    EventRegistrationView,
    EventStatsView,
)

# Routes match with or without a trailing slash; APPEND_SLASH is off.
urlpatterns = [
    re_path(r"^events/?$", EventListView.as_view(), name="event-list"),
    re_path(
        r"^events/(?P<event_id>[^/]+)/?$",
        EventDetailView.as_view(),
        name="event-detail",
    ),
    re_path(
        r"^events/(?P<event_id>[^/]+)/register/?$",
        EventRegistrationView.as_view(),
        name="event-register",
    ),
    re_path(
        r"^events/(?P<event_id>[^/]+)/stats/?$",
        EventStatsView.as_view(),
        name="event-stats",
    ),
]
