"""Retry with exponential backoff for remote reads.

Usage:
    from infrastructure.resilience.retry import BackoffConfig, RetryPolicy

    policy = RetryPolicy(BackoffConfig(max_retries=3))
    result = await policy.run(lambda: client.select("cms_translations"))
"""

from infrastructure.resilience.retry.config import BackoffConfig
from infrastructure.resilience.retry.policy import RetryPolicy

__all__ = [
    "BackoffConfig",
    "RetryPolicy",
]
