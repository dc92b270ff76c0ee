"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.retry import RetrySettings
from infrastructure.configuration.infrastructure.server import ServerSettings
from infrastructure.configuration.infrastructure.session_cache import (
    SessionCacheSettings,
)

__all__ = [
    "RetrySettings",
    "ServerSettings",
    "SessionCacheSettings",
]
