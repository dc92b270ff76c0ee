"""Retry-with-backoff execution for async operations returning OperationResult."""

import asyncio
from typing import Awaitable, Callable, Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_http_error
from infrastructure.resilience.retry.config import BackoffConfig

logger = get_module_logger()

Sleep = Callable[[float], Awaitable[None]]


class RetryPolicy:
    """Runs an async operation until it succeeds or the attempts run out.

    Every failed result is retried, the way the remote store reads have
    always behaved: a rejected query is as likely to be a flaky edge
    function as a real error, and the attempt count is small.

    Attributes:
        config: BackoffConfig controlling attempts and delays
    """

    def __init__(
        self,
        config: Optional[BackoffConfig] = None,
        sleep: Optional[Sleep] = None,
    ) -> None:
        """Initialize the policy.

        Args:
            config: Optional BackoffConfig. Defaults to 1 + 3 attempts.
            sleep: Awaitable sleep taking seconds. Defaults to asyncio.sleep.
        """
        self.config = config or BackoffConfig()
        self._sleep = sleep or asyncio.sleep

    async def run(
        self,
        operation: Callable[[], Awaitable[OperationResult]],
        operation_name: str = "remote_call",
    ) -> OperationResult:
        """Execute ``operation`` with retries.

        Exceptions escaping the operation are classified into an
        OperationResult and treated like any other failure.

        Args:
            operation: Zero-argument coroutine function returning OperationResult
            operation_name: Name used in log events

        Returns:
            The first successful result, or the last failed one.
        """
        log = logger.bind(operation=operation_name)
        result: Optional[OperationResult] = None

        attempts = 0
        for attempt in range(self.config.total_attempts):
            attempts = attempt + 1
            try:
                result = await operation()
            except Exception as exc:  # pylint: disable=broad-except
                result = classify_http_error(exc)

            if result.is_success:
                if attempt:
                    log.info("retry_succeeded", attempts=attempt + 1)
                return result

            if attempt + 1 >= self.config.total_attempts:
                break

            delay_ms = self.config.delay_ms(attempt)
            log.warning(
                "retry_scheduled",
                attempt=attempt + 1,
                delay_ms=delay_ms,
                error=result.message,
                error_code=result.error_code,
            )
            await self._sleep(delay_ms / 1000)

        log.error(
            "retries_exhausted",
            attempts=attempts,
            error=result.message if result else None,
        )
        return result
