"""API dependencies for FastAPI endpoints."""

from collections.abc import Callable
from typing import TypeVar

from clinic_registry.services.registry import get_service_registry

T = TypeVar("T")


def service(service_type: type[T]) -> Callable[[], T]:
    """FastAPI dependency resolving a service from the registry.

    Example:
        ```python
        @router.get("/endpoint")
        def endpoint(schedule: ScheduleService = Depends(service(ScheduleService))):
            ...
        ```
    """

    def get_service() -> T:
        return get_service_registry().get(service_type)

    return get_service
