"""Dependency injection setup shared by the server and the CLI."""

from loguru import logger

from clinic_registry.services.registry import ServiceRegistry
from clinic_registry.services.schedule_service import ScheduleService, get_schedule_service
from clinic_registry.store import RegistryStore, get_registry_store


def register_all_services(registry: ServiceRegistry) -> None:
    """Register the registry store and the schedule service.

    Both are registered as factories over their ``lru_cache`` getters, so
    the store is only seeded on first use and every lookup shares it.

    Args:
        registry: Service registry instance to register services in
    """
    logger.debug("Registering services in DI container")

    registry.register_factory(RegistryStore, get_registry_store)
    registry.register_factory(ScheduleService, get_schedule_service)
