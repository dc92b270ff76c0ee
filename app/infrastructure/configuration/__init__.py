"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
translation service using Pydantic BaseSettings with domain-based
organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    RetrySettings: Retry settings class (for testing)
    I18nSettings: Translation feature settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    url = settings.supabase.SUPABASE_URL
    retries = settings.retry.max_retries
    cookie = settings.i18n.language_cookie

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.features.i18n import I18nSettings
from infrastructure.configuration.infrastructure.retry import RetrySettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "RetrySettings", "I18nSettings"]
