"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime, timedelta

import pytest
from rest_framework.test import APIClient

from events.services.event_service import EventService
from events.services.registration_service import RegistrationService
from tests.fakes import InMemoryDatabase, InMemoryEventStore, InMemoryRegistrationStore

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def event_service(memory_db: InMemoryDatabase) -> EventService:
    return EventService(InMemoryEventStore(memory_db), clock=lambda: NOW)


@pytest.fixture
def registration_service(memory_db: InMemoryDatabase) -> RegistrationService:
    return RegistrationService(InMemoryRegistrationStore(memory_db), clock=lambda: NOW)


@pytest.fixture
def future_event(memory_db: InMemoryDatabase):
    return memory_db.add_event("Launch", NOW + timedelta(days=1), "HQ", capacity=1)


@pytest.fixture
def past_event(memory_db: InMemoryDatabase):
    return memory_db.add_event("Retro", NOW - timedelta(days=1), "HQ", capacity=10)
