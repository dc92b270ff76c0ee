"""Supabase (PostgREST) integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class SupabaseSettings(IntegrationSettings):
    """Hosted database connection settings.

    Environment Variables:
        SUPABASE_URL: Project URL (e.g. https://xyz.supabase.co)
        SUPABASE_ANON_KEY: Public anon key sent as apikey and bearer token
        SUPABASE_TIMEOUT_SECONDS: HTTP timeout for a single request (default: 10s)

    When SUPABASE_URL is empty the application runs against an in-memory
    table client, which is what local development and tests use.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        if settings.supabase.is_configured:
            url = settings.supabase.SUPABASE_URL
        ```
    """

    SUPABASE_URL: str = Field(default="", alias="SUPABASE_URL")
    SUPABASE_ANON_KEY: str = Field(default="", alias="SUPABASE_ANON_KEY")
    SUPABASE_TIMEOUT_SECONDS: float = Field(
        default=10.0, alias="SUPABASE_TIMEOUT_SECONDS"
    )

    @property
    def is_configured(self) -> bool:
        """True when both the URL and the anon key are set."""
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)
