"""Retry policy infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class RetrySettings(InfrastructureSettings):
    """Retry configuration for remote data store reads.

    Controls the bounded exponential backoff used when fetching translations,
    languages and hot-path content from the remote store.

    Environment Variables:
        RETRY_ENABLED: Enable retries for remote reads (default: True)
        RETRY_MAX_RETRIES: Retries after the initial attempt (default: 3)
        RETRY_INITIAL_DELAY_MS: Delay before the first retry (default: 1000ms)
        RETRY_MAX_DELAY_MS: Cap applied to every delay (default: 5000ms)

    Exponential Backoff:
        Delay calculation: min(initial_delay * (2 ^ attempt), max_delay)

        Example with defaults (initial=1000ms, max=5000ms):
            Retry 1: 1000ms
            Retry 2: 2000ms
            Retry 3: 4000ms
            Further retries: 5000ms (capped)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.retry.enabled:
            retries = settings.retry.max_retries
        ```
    """

    enabled: bool = Field(
        default=True,
        alias="RETRY_ENABLED",
        description="Retry failed remote reads with exponential backoff",
    )
    max_retries: int = Field(
        default=3,
        alias="RETRY_MAX_RETRIES",
        description="Number of retries after the initial attempt",
    )
    initial_delay_ms: int = Field(
        default=1000,
        alias="RETRY_INITIAL_DELAY_MS",
        description="Delay before the first retry (milliseconds)",
    )
    max_delay_ms: int = Field(
        default=5000,
        alias="RETRY_MAX_DELAY_MS",
        description="Maximum delay between attempts (milliseconds)",
    )
