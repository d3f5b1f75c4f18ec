"""Shared fixtures: every test gets its own freshly seeded registry."""

import pytest
from fastapi.testclient import TestClient

from clinic_registry.services.registry import get_service_registry
from clinic_registry.services.schedule_service import ScheduleService
from clinic_registry.settings import Settings
from clinic_registry.store import RegistryStore, create_seeded_store


@pytest.fixture
def settings() -> Settings:
    """Default settings, unaffected by the environment's .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def store() -> RegistryStore:
    """A registry seeded with the built-in dataset."""
    return create_seeded_store()


@pytest.fixture
def schedule_service(store: RegistryStore, settings: Settings) -> ScheduleService:
    """A schedule service bound to the isolated store."""
    return ScheduleService(store, settings)


@pytest.fixture
def client(store: RegistryStore, schedule_service: ScheduleService):
    """A test client whose service registry points at the isolated store."""
    from clinic_registry.app import app

    with TestClient(app) as test_client:
        # The lifespan registers the process-wide services; replace them afterwards
        registry = get_service_registry()
        registry.register_singleton(RegistryStore, store)
        registry.register_singleton(ScheduleService, schedule_service)
        yield test_client

    get_service_registry().clear()
