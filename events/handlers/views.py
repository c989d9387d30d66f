"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never expose internal error details

Domain errors raised by services are mapped to HTTP responses by
events.handlers.errors.exception_handler.
"""

from typing import Any

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.serializers import (
    EventDetailsSerializer,
    EventStatsSerializer,
    RegistrationResultSerializer,
    UpcomingEventSerializer,
)
from events.services.event_service import EventService
from events.services.registration_service import RegistrationService
from events.stores.django_store import DjangoEventStore, DjangoRegistrationStore


def event_service() -> EventService:
    return EventService(DjangoEventStore())


def registration_service() -> RegistrationService:
    return RegistrationService(DjangoRegistrationStore())


def _body(request: Request) -> dict[str, Any]:
    return request.data if isinstance(request.data, dict) else {}


class EventListView(APIView):
    """Handler for GET/POST /events"""

    def get(self, request: Request) -> Response:
        events = event_service().list_upcoming_events()
        return Response({"events": UpcomingEventSerializer(events, many=True).data})

    def post(self, request: Request) -> Response:
        event = event_service().create_event(_body(request))
        return Response({"eventId": event.id.value}, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        details = event_service().get_event_details(event_id)
        return Response(EventDetailsSerializer(details).data)


class EventRegistrationView(APIView):
    """Handler for POST/DELETE /events/{event_id}/register"""

    def post(self, request: Request, event_id: str) -> Response:
        result = registration_service().register_user(event_id, _body(request))
        return Response(
            RegistrationResultSerializer(result).data, status=status.HTTP_201_CREATED
        )

    def delete(self, request: Request, event_id: str) -> Response:
        user_id = _body(request).get("userId")
        registration_service().cancel_registration(event_id, user_id)
        return Response({"message": "Registration cancelled"})


class EventStatsView(APIView):
    """Handler for GET /events/{event_id}/stats"""

    def get(self, request: Request, event_id: str) -> Response:
        stats = event_service().event_stats(event_id)
        return Response(EventStatsSerializer(stats).data)


class HealthView(APIView):
    """Handler for GET /health"""

    def get(self, request: Request) -> Response:
        return Response({"status": "ok"})
