"""Version utility module for the clinic registry."""

import re

from loguru import logger
from pydantic import BaseModel

DEV_VERSION = "0.1.0-dev"

# e.g. 0.1.0.post11+ga524f7b.dirty.2025-03-23T21:41:10Z (every part after the base is optional)
_VERSION_PATTERN = re.compile(
    r"^(?P<base>\d+\.\d+\.\d+)"
    r"(?:\.post(?P<post>\d+))?"
    r"(?:\+g(?P<commit>[a-f0-9]+))?"
    r"(?P<dirty>\.dirty)?"
    r"(?:\.(?P<timestamp>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z))?"
)


class VersionInfo(BaseModel):
    """Version information model."""

    full_version: str
    version: str
    post_count: str | None = None
    git_commit: str | None = None
    is_dirty: bool = False
    build_timestamp: str | None = None


def parse_version(version: str) -> VersionInfo:
    """Split a build version string into its components.

    Strings that do not start with a ``X.Y.Z`` base version are kept whole
    as the base version.

    Examples:
        >>> parse_version("0.2.1").post_count is None
        True
        >>> parse_version("0.1.0.post11+ga524f7b.dirty").git_commit
        'a524f7b'
    """
    match = _VERSION_PATTERN.match(version)
    if match is None:
        return VersionInfo(full_version=version, version=version)

    return VersionInfo(
        full_version=version,
        version=match.group("base"),
        post_count=match.group("post"),
        git_commit=match.group("commit"),
        is_dirty=match.group("dirty") is not None,
        build_timestamp=match.group("timestamp"),
    )


def get_version() -> VersionInfo:
    """Get the installed package version, falling back to a development version.

    ``clinic_registry/__version__.py`` is written at build time; it is absent
    in a plain source checkout.
    """
    try:
        from clinic_registry.__version__ import __version__ as full_version
    except ImportError:
        logger.trace("clinic_registry.__version__ not found, using development version")
        return VersionInfo(full_version=DEV_VERSION, version=DEV_VERSION)

    return parse_version(full_version)
