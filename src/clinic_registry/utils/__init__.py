"""Utility functions for the clinic registry."""

from clinic_registry.utils.version import VersionInfo, get_version, parse_version

__all__ = ["VersionInfo", "get_version", "parse_version"]
