"""Resilience patterns.

Currently bounded retry with exponential backoff for remote data store reads.
"""

from infrastructure.resilience.retry import BackoffConfig, RetryPolicy

__all__ = [
    "BackoffConfig",
    "RetryPolicy",
]
