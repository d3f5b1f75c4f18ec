"""Application configuration using Pydantic Settings.

Runtime configuration for the clinic registry server. Values come from
environment variables (preferred), an optional ``.env`` file, or the defaults
below. Use ``get_settings`` to retrieve the process-wide cached instance.

Environment variable prefix: ``CLINIC_REGISTRY_`` (e.g. ``CLINIC_REGISTRY_PORT``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    """Runtime application settings.

    Attributes map to environment variables using the ``CLINIC_REGISTRY_``
    prefix (case-insensitive). For example, ``port`` <- ``CLINIC_REGISTRY_PORT``.
    """

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host interface to bind the server",
    )  # fmt: skip
    port: int = Field(
        default=4567,
        description="Server port",
    )  # fmt: skip
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Application log level",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload in development",
    )  # fmt: skip
    profiles: str | None = Field(
        default=None,
        description="Server profiles: rest, graphql, or comma-separated combination. Empty/None enables all.",
    )  # fmt: skip

    # Registry settings
    seed_file: str | None = Field(
        default=None,
        description="JSON file with the doctors to seed the registry with. None uses the built-in seed.",
    )  # fmt: skip
    rename_in_place: bool = Field(
        default=False,
        description="Keep a renamed event at its position instead of moving it to the end of the schedule",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()
        if v_upper not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(LOG_LEVELS))}")

        return v_upper

    model_config = SettingsConfigDict(
        env_prefix="CLINIC_REGISTRY_",
        case_sensitive=False,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first call reads environment variables / .env file; later calls
    reuse the same object so CLI overrides applied to it are seen everywhere.
    """

    return Settings()


__all__ = ["Settings", "get_settings"]
