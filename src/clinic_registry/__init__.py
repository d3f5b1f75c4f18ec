"""Clinic registry: doctors and their appointment schedules over GraphQL and REST."""

from .settings import Settings, get_settings  # noqa: F401

__all__ = ["get_settings", "Settings"]
