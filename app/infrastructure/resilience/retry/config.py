"""Backoff configuration for remote reads."""

from dataclasses import dataclass


@dataclass
class BackoffConfig:
    """Configuration for bounded exponential backoff.

    Attributes:
        max_retries: Retries after the initial attempt
        initial_delay_ms: Delay before the first retry
        max_delay_ms: Cap applied to every delay

    Example:
        # Default configuration: 4 attempts, sleeps of 1000, 2000, 4000 ms
        config = BackoffConfig()

        # No retries at all
        config = BackoffConfig(max_retries=0)
    """

    max_retries: int = 3
    initial_delay_ms: int = 1000
    max_delay_ms: int = 5000

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.initial_delay_ms < 0:
            raise ValueError("initial_delay_ms must be >= 0")
        if self.max_delay_ms < self.initial_delay_ms:
            raise ValueError("max_delay_ms must be >= initial_delay_ms")

    @property
    def total_attempts(self) -> int:
        """Initial attempt plus retries."""
        return self.max_retries + 1

    def delay_ms(self, retry_index: int) -> int:
        """Delay before retry number ``retry_index`` (zero based).

        min(initial_delay * 2 ** retry_index, max_delay)
        """
        return min(self.initial_delay_ms * (2**retry_index), self.max_delay_ms)

    @classmethod
    def from_settings(cls, retry_settings) -> "BackoffConfig":
        """Build from RetrySettings; a disabled retry system means no retries."""
        return cls(
            max_retries=retry_settings.max_retries if retry_settings.enabled else 0,
            initial_delay_ms=retry_settings.initial_delay_ms,
            max_delay_ms=retry_settings.max_delay_ms,
        )
