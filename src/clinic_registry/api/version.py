"""Version API endpoint."""

from fastapi import APIRouter

from clinic_registry.utils.version import VersionInfo, get_version

router = APIRouter(tags=["System"])


@router.get("", response_model=VersionInfo)
async def get_version_endpoint() -> VersionInfo:
    """Get the version information."""
    return get_version()
