"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    datetime = serializers.DateTimeField(source="starts_at")
    location = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")


class UpcomingEventSerializer(serializers.Serializer):
    """Serializer for UpcomingEvent: the event fields plus its registration count."""

    id = serializers.IntegerField(source="event.id.value")
    title = serializers.CharField(source="event.title")
    datetime = serializers.DateTimeField(source="event.starts_at")
    location = serializers.CharField(source="event.location")
    capacity = serializers.IntegerField(source="event.capacity.value")
    registrations_count = serializers.IntegerField()


class AttendeeSerializer(serializers.Serializer):
    """Serializer for Attendee domain model."""

    id = serializers.IntegerField(source="user_id.value")
    name = serializers.CharField()
    email = serializers.CharField()
    registered_at = serializers.DateTimeField()


class EventDetailsSerializer(serializers.Serializer):
    event = EventSerializer()
    registrations = AttendeeSerializer(source="attendees", many=True)


class EventStatsSerializer(serializers.Serializer):
    eventId = serializers.IntegerField(source="event_id.value")
    totalRegistrations = serializers.IntegerField(source="total_registrations")
    remainingCapacity = serializers.IntegerField(source="remaining_capacity")
    percentageCapacityUsed = serializers.SerializerMethodField()

    def get_percentageCapacityUsed(self, stats) -> float:
        return float(stats.percentage_capacity_used)


class RegistrationResultSerializer(serializers.Serializer):
    message = serializers.SerializerMethodField()
    userId = serializers.IntegerField(source="user_id.value")
    eventId = serializers.IntegerField(source="event_id.value")

    def get_message(self, result) -> str:
        return "Registration successful" if result.success else "Registration failed"
