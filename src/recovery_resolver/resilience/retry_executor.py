"""
Retry Executor - Retry with Backoff, then Recover.

Runs the primary operation up to max_attempts times with exponential
backoff. When the last attempt fails the recoverer (if any) gets the
original arguments and the last exception; without a recoverer the
failure surfaces as RetryExhausted.

Exceptions outside retry_on propagate immediately and skip recovery.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional, Sequence, Tuple, TypeVar

from recovery_resolver.config.models import RetryConfig
from recovery_resolver.interfaces.recoverer import Recoverer
from recovery_resolver.observability.observability_manager import ObservabilityManager
from recovery_resolver.resilience.errors import RetryExhausted

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExecutor:
    """Retry loop that hands the final failure to a recoverer."""

    def __init__(
        self,
        retry_config: Optional[RetryConfig] = None,
        retry_on: Tuple[type, ...] = (Exception,),
        observer: Optional[ObservabilityManager] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize retry executor.

        Args:
            retry_config: Attempts and backoff settings
            retry_on: Exception types that trigger another attempt
            observer: Optional structured event sink
            sleep: Delay function (replaceable in tests)
        """
        self.retry_config = retry_config or RetryConfig()
        self.retry_on = retry_on
        self._observer = observer
        self._sleep = sleep

    def execute(
        self,
        func: Callable[..., T],
        args: Sequence[Any] = (),
        recoverer: Optional[Recoverer[T]] = None,
        operation_name: str = "operation",
    ) -> T:
        """
        Execute func(*args) with retry and optional recovery.

        Args:
            func: Primary operation
            args: Positional arguments, also passed to the recoverer
            recoverer: Called with (args, last exception) after the last attempt
            operation_name: Name for logging

        Returns:
            Result of a successful attempt or of the recoverer

        Raises:
            RetryExhausted: When all attempts fail and no recoverer is given
        """
        max_attempts = self.retry_config.max_attempts
        last_exception: Optional[BaseException] = None

        for attempt in range(1, max_attempts + 1):
            try:
                result = func(*args)
                if attempt > 1:
                    logger.info(f"{operation_name} succeeded on attempt {attempt}")
                return result

            except self.retry_on as e:
                last_exception = e
                if self._observer is not None:
                    self._observer.log_retry_attempt(operation_name, attempt, max_attempts, e)
                if attempt < max_attempts:
                    delay = self._calculate_delay(attempt)
                    logger.warning(
                        f"{operation_name} failed (attempt {attempt}/{max_attempts}), "
                        f"retrying in {delay:.2f}s: {e}"
                    )
                    self._sleep(delay)
                else:
                    logger.error(f"{operation_name} failed after {attempt} attempts: {e}")

        if recoverer is not None:
            logger.info(f"{operation_name} exhausted retries, attempting recovery")
            return recoverer.recover(list(args), last_exception)

        raise RetryExhausted(
            f"{operation_name} failed after {max_attempts} attempts", last_exception
        ) from last_exception

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate delay with exponential backoff."""
        delay = self.retry_config.base_delay_seconds * (
            self.retry_config.exponential_base ** (attempt - 1)
        )
        return min(delay, self.retry_config.max_delay_seconds)
