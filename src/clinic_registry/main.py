"""Command line entry point for the clinic registry server."""

import typer
import uvicorn
from loguru import logger

from clinic_registry.logging import setup_logging
from clinic_registry.settings import get_settings
from clinic_registry.store import create_seeded_store

app = typer.Typer(
    name="clinic-registry",
    help="Clinic registry server - doctors and their appointment schedules",
    no_args_is_help=True,
)


HOST_OPTION = typer.Option(
    None,
    help="Host to bind the server to (overrides CLINIC_REGISTRY_HOST)",
    metavar="<server>",
)  # fmt: skip
PORT_OPTION = typer.Option(
    None,
    help="Port to bind the server to (overrides CLINIC_REGISTRY_PORT)",
    metavar="<port>",
)  # fmt: skip
RELOAD_OPTION = typer.Option(
    None,
    help="Enable/disable auto-reload (overrides CLINIC_REGISTRY_RELOAD)",
)  # fmt: skip
LOG_LEVEL_OPTION = typer.Option(
    None,
    help="Log level (overrides CLINIC_REGISTRY_LOG_LEVEL)",
    metavar="<level>",
    case_sensitive=False,
)  # fmt: skip
PROFILE_OPTION = typer.Option(
    None,
    "-p",
    "--profile",
    help="Server profile: rest, graphql, or combination (e.g., 'rest,graphql'). Omit for all.",
    metavar="<profile>",
)  # fmt: skip
SEED_FILE_OPTION = typer.Option(
    None,
    help="JSON seed file (overrides CLINIC_REGISTRY_SEED_FILE)",
    metavar="<path>",
)  # fmt: skip


def _update_settings(
    host: str | None = None,
    port: int | None = None,
    log_level: str | None = None,
    reload: bool | None = None,
    profiles: str | None = None,
    seed_file: str | None = None,
) -> None:
    """Apply CLI overrides to the cached settings."""
    settings = get_settings()
    overrides = {
        "host": host,
        "port": port,
        "log_level": log_level.upper() if log_level is not None else None,
        "reload": reload,
        "profiles": profiles,
        "seed_file": seed_file,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(settings, name, value)


@app.command()
def run(
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
    reload: bool = RELOAD_OPTION,
    profile: str = PROFILE_OPTION,
    seed_file: str = SEED_FILE_OPTION,
) -> None:
    """Run the clinic registry server."""
    _update_settings(host, port, log_level, reload, profile, seed_file)
    settings = get_settings()

    setup_logging(settings.log_level)

    logger.info(f"Starting clinic registry on {settings.host}:{settings.port}")
    logger.info(f"Profile: {settings.profiles or 'all'}")
    logger.info(f"Reload: {settings.reload}")

    # Reload mode needs an import string
    if settings.reload:
        uvicorn.run(
            "clinic_registry.app:app",
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level=settings.log_level.lower(),
        )
    else:
        from clinic_registry.app import app as fastapi_app

        uvicorn.run(
            fastapi_app,
            host=settings.host,
            port=settings.port,
            reload=False,
            log_level=settings.log_level.lower(),
        )


@app.command()
def check(
    log_level: str = LOG_LEVEL_OPTION,
    seed_file: str = SEED_FILE_OPTION,
) -> None:
    """Load and validate the registry seed, then exit."""
    _update_settings(log_level=log_level, seed_file=seed_file)
    settings = get_settings()

    setup_logging(settings.log_level)
    logger.info(f"Checking registry seed: {settings.seed_file or 'built-in'}")

    try:
        store = create_seeded_store(settings.seed_file)
    except (OSError, ValueError) as e:
        logger.error(f"Seed check failed: {e}")
        raise SystemExit(1) from None

    for doctor in store.doctors:
        logger.info(f"Doctor {doctor.doctor_id} ({doctor.doctor_name}, {doctor.clinic_name}): {len(doctor.event)} event(s)")
    logger.info("Seed check completed successfully")


if __name__ == "__main__":
    app()
