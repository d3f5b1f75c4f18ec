"""Main FastAPI application module."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from clinic_registry.api.api_router import router as api_router
from clinic_registry.api.health_check import router as health_router
from clinic_registry.api.ping import router as ping_router
from clinic_registry.api.version import router as version_router
from clinic_registry.constants import PROFILE_GRAPHQL, PROFILE_REST
from clinic_registry.exception_handlers import register_exception_handlers
from clinic_registry.logging import setup_logging
from clinic_registry.profile import parse_profile
from clinic_registry.services.di import register_all_services
from clinic_registry.services.registry import get_service_registry
from clinic_registry.settings import Settings, get_settings
from clinic_registry.store import RegistryStore
from clinic_registry.utils.version import get_version


def _log_server_endpoints_summary(settings: Settings, active_profiles: set[str]) -> None:
    """Log the server URL and the endpoints mounted for the active profiles."""
    server_url = f"http://{settings.host}:{settings.port}"
    logger.info(f"Server running at: {server_url}")

    endpoints = [
        ("Health Check", "/health-check"),
        ("Ping", "/ping"),
        ("Version", "/version"),
        ("API Docs", "/docs"),
    ]
    if PROFILE_REST in active_profiles:
        endpoints.append(("REST API", "/api/doctors/{doctor_id}"))
    if PROFILE_GRAPHQL in active_profiles:
        endpoints.append(("GraphQL", "/graphql"))

    logger.info("Available endpoints:")
    for name, path in endpoints:
        logger.info(f"   {name}: {server_url}{path}")

    logger.info(f"Active profiles: {', '.join(sorted(active_profiles))}")


@asynccontextmanager
async def app_lifespan(_app: FastAPI):
    """Register services and seed the registry before serving requests."""
    settings = get_settings()
    _app.state.settings = settings  # type: ignore[attr-defined]

    setup_logging(settings.log_level)

    registry = get_service_registry()
    register_all_services(registry)

    # Seed eagerly so malformed seed data stops the server at startup
    store = registry.get(RegistryStore)
    logger.info(f"Registry ready: {len(store.doctors)} doctor(s), {store.event_count()} event(s)")

    active_profiles = parse_profile(settings.profiles)
    _app.state.active_profiles = active_profiles  # type: ignore[attr-defined]
    _log_server_endpoints_summary(settings, active_profiles)

    yield

    logger.info("Clinic registry shutting down")


app = FastAPI(
    lifespan=app_lifespan,
    title="Clinic registry",
    description="Doctors and their appointment schedules over GraphQL and REST",
    version=get_version().version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Routers are mounted at import time, so the profile is read here as well
profile = parse_profile(get_settings().profiles)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# System endpoints - always enabled
app.include_router(health_router, prefix="")
app.include_router(ping_router, prefix="")
app.include_router(version_router, prefix="/version")

if PROFILE_REST in profile:
    app.include_router(api_router, prefix="/api")

if PROFILE_GRAPHQL in profile:
    from clinic_registry.graphql.graphql_router import create_graphql_router

    app.include_router(create_graphql_router(), prefix="/graphql")
