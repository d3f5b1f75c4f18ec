"""Health check API endpoint."""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from clinic_registry.api.dependencies import service
from clinic_registry.store import RegistryStore
from clinic_registry.utils.version import VersionInfo, get_version

router = APIRouter(tags=["System"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version_info: VersionInfo
    profiles: list[str]
    doctors: int
    events: int

    class Config:
        """Pydantic model configuration."""

        json_schema_extra = {
            "example": {
                "status": "ok",
                "version_info": {
                    "version": "0.1.0",
                    "full_version": "0.1.0.post3+g1c2d3e4",
                    "post_count": "3",
                    "git_commit": "1c2d3e4",
                    "is_dirty": False,
                    "build_timestamp": None,
                },
                "profiles": ["graphql", "rest"],
                "doctors": 1,
                "events": 2,
            }
        }


store_dependency = Depends(service(RegistryStore))


@router.get("/health-check", response_model=HealthResponse)
async def health_check(request: Request, store: RegistryStore = store_dependency) -> HealthResponse:
    """Report the server version and the size of the registry."""
    active_profiles = getattr(request.app.state, "active_profiles", set())
    return HealthResponse(
        status="ok",
        version_info=get_version(),
        profiles=sorted(active_profiles),
        doctors=len(store.doctors),
        events=store.event_count(),
    )
