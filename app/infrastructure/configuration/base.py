"""Shared base classes for settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Every section reads the same .env file; field aliases are the variable names.
SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
    populate_by_name=True,
)


class SectionSettings(BaseSettings):
    """One named block of the root Settings, loaded from the environment."""

    model_config = SECTION_CONFIG


class IntegrationSettings(SectionSettings):
    """External services the application talks to (the hosted database)."""


class FeatureSettings(SectionSettings):
    """Feature behaviour such as the default language and table names."""


class InfrastructureSettings(SectionSettings):
    """Retry, session cache and server behaviour."""
