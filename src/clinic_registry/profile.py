"""Server profile parsing.

A profile selects which API surfaces are mounted (REST, GraphQL).
"""

from clinic_registry.constants import PROFILE_GRAPHQL, PROFILE_REST

VALID_PROFILES = frozenset({PROFILE_REST, PROFILE_GRAPHQL})


def parse_profile(config: str | None) -> set[str]:
    """Parse server profile configuration.

    Args:
        config: Comma-separated profile names (case-insensitive), None, or empty string.
               None or empty string enables all profiles.

    Returns:
        Set of enabled profile names in lowercase

    Raises:
        ValueError: If an unknown profile name is given

    Examples:
        >>> sorted(parse_profile(None))
        ['graphql', 'rest']
        >>> parse_profile("GraphQL")
        {'graphql'}
    """
    if not config or not config.strip():
        return set(VALID_PROFILES)

    profiles = {p.strip().lower() for p in config.split(",") if p.strip()}

    invalid = profiles - VALID_PROFILES
    if invalid:
        raise ValueError(f"Invalid profile components: {invalid}. Valid: {', '.join(sorted(VALID_PROFILES))}")

    return profiles


__all__ = ["parse_profile", "VALID_PROFILES"]
