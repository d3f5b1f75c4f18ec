"""GraphQL context with service registry integration."""

from typing import Any, TypeVar

from fastapi import Request
from strawberry.fastapi import BaseContext

from clinic_registry.services.registry import get_service_registry

T = TypeVar("T")


class GraphQLContext(BaseContext):
    """GraphQL context giving resolvers access to registered services."""

    def __init__(self, request: Request, **kwargs: Any):
        """Initialize the GraphQL context.

        Args:
            request: The FastAPI request object
            **kwargs: Additional context values
        """
        super().__init__()
        self.request = request
        self._registry = get_service_registry()

        for key, value in kwargs.items():
            setattr(self, key, value)

    def service(self, service_type: type[T]) -> T:
        """Get a service by type from the registry.

        Raises:
            KeyError: If the requested service is not registered
        """
        return self._registry.get(service_type)
