"""Session cache infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class SessionCacheSettings(InfrastructureSettings):
    """Session-scoped cache configuration.

    Environment Variables:
        SESSION_CACHE_TTL_SECONDS: Lifetime of a cached snapshot (default: 60s)
        SESSION_CACHE_PREFIX: Prefix applied to every cache key (default: kudosim_)

    Example:
        ```python
        from infrastructure.services import get_settings

        ttl = get_settings().session_cache.ttl_seconds
        ```
    """

    ttl_seconds: int = Field(default=60, alias="SESSION_CACHE_TTL_SECONDS")
    prefix: str = Field(default="kudosim_", alias="SESSION_CACHE_PREFIX")
