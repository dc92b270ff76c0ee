"""Unit tests for BackoffConfig."""

import pytest

from infrastructure.configuration import RetrySettings
from infrastructure.resilience.retry import BackoffConfig


class TestBackoffConfig:
    def test_default_delays(self):
        """Four attempts sleeping 1s, 2s, 4s between them."""
        config = BackoffConfig()
        assert config.total_attempts == 4
        assert [config.delay_ms(i) for i in range(3)] == [1000, 2000, 4000]

    def test_delay_capped(self):
        """Delays never exceed max_delay_ms."""
        config = BackoffConfig(max_retries=5, max_delay_ms=5000)
        assert config.delay_ms(3) == 5000
        assert config.delay_ms(4) == 5000

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_retries": -1},
            {"initial_delay_ms": -5},
            {"initial_delay_ms": 2000, "max_delay_ms": 1000},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        """Negative or inverted values raise ValueError."""
        with pytest.raises(ValueError):
            BackoffConfig(**kwargs)

    def test_from_settings(self):
        """Values are taken from RetrySettings."""
        config = BackoffConfig.from_settings(
            RetrySettings(RETRY_MAX_RETRIES=2, RETRY_INITIAL_DELAY_MS=10, RETRY_MAX_DELAY_MS=40)
        )
        assert config.total_attempts == 3
        assert config.delay_ms(0) == 10

    def test_from_disabled_settings(self):
        """A disabled retry system keeps only the initial attempt."""
        config = BackoffConfig.from_settings(RetrySettings(RETRY_ENABLED=False))
        assert config.total_attempts == 1
