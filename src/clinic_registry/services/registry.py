"""Service registry for dependency injection."""

from collections.abc import Callable
from functools import lru_cache
from typing import Any, TypeVar, cast

T = TypeVar("T")
ServiceFactory = Callable[[], T]


class ServiceRegistry:
    """Maps service types to a singleton instance or a factory."""

    def __init__(self):
        self._instances: dict[type, Any] = {}
        self._factories: dict[type, ServiceFactory[Any]] = {}

    def register_singleton(self, service_type: type[T], instance: T) -> None:
        """Register a ready-made instance, replacing any earlier provider.

        Args:
            service_type: The type the instance is looked up by
            instance: The instance to hand out
        """
        self._factories.pop(service_type, None)
        self._instances[service_type] = instance

    def register_factory(self, service_type: type[T], factory: ServiceFactory[T]) -> None:
        """Register a factory called on every lookup, replacing any earlier provider.

        Args:
            service_type: The type the factory is looked up by
            factory: Zero-argument callable building the service
        """
        self._instances.pop(service_type, None)
        self._factories[service_type] = factory

    def get(self, service_type: type[T]) -> T:
        """Resolve a service by type.

        Raises:
            KeyError: If nothing is registered for the type
        """
        if service_type in self._instances:
            return cast(T, self._instances[service_type])
        if service_type in self._factories:
            return cast(T, self._factories[service_type]())
        raise KeyError(f"Service {service_type.__name__} not registered")

    def clear(self) -> None:
        """Drop every registration."""
        self._instances.clear()
        self._factories.clear()


@lru_cache
def get_service_registry() -> ServiceRegistry:
    """Get the process-wide service registry."""
    return ServiceRegistry()
