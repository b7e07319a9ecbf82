"""
Retryable Decorator - Retry a Method, then Recover Through Its Class.

    class Inventory:
        @retryable(recover="stock_from_cache", max_attempts=2)
        def stock(self, sku: str) -> int:
            ...

        @recover(name="stock_from_cache")
        def _cached(self, error: TimeoutError, sku: str) -> int:
            ...

Each call runs through a RetryExecutor. When the retries are used up the
@recover handlers of the instance's class are resolved against the last
exception and the call's positional arguments. The handler index is built
once per owner class on first use and shared by all its instances.
Keyword arguments are not supported since recovery handlers receive
arguments by position.
"""

from __future__ import annotations

import functools
import threading
from typing import Any, Callable, Dict, Optional, Sequence

from recovery_resolver.config.models import RetryConfig
from recovery_resolver.observability.observability_manager import ObservabilityManager
from recovery_resolver.registry.declarations import (
    RETRYABLE_ATTRIBUTE,
    RetryableSpec,
    describe_operation,
    scan_declared_handlers,
)
from recovery_resolver.resilience.retry_executor import RetryExecutor
from recovery_resolver.resolution.recovery_handler import RecoveryHandler


def retryable(
    func: Optional[Callable[..., Any]] = None,
    *,
    recover: str = "",
    max_attempts: Optional[int] = None,
    retry_on: Sequence[type] = (Exception,),
    retry_config: Optional[RetryConfig] = None,
    observer: Optional[ObservabilityManager] = None,
) -> Any:
    """
    Mark a method as a retried primary operation with recovery.

    Args:
        func: Method when used bare (@retryable)
        recover: Preferred recovery handler name (empty: closest match)
        max_attempts: Overrides retry_config.max_attempts
        retry_on: Exception types that trigger another attempt
        retry_config: Backoff settings (default: RetryConfig())
        observer: Optional structured event sink
    """
    spec = RetryableSpec(
        recover=recover,
        max_attempts=max_attempts,
        retry_on=tuple(retry_on),
    )
    config = retry_config or RetryConfig()
    if max_attempts is not None:
        config = config.model_copy(update={"max_attempts": max_attempts})

    def decorate(f: Callable[..., Any]) -> Callable[..., Any]:
        executor = RetryExecutor(config, retry_on=spec.retry_on, observer=observer)
        handlers_by_owner: Dict[type, RecoveryHandler[Any]] = {}
        lock = threading.Lock()

        def handler_for(owner: type) -> RecoveryHandler[Any]:
            with lock:
                if owner not in handlers_by_owner:
                    handlers_by_owner[owner] = RecoveryHandler(
                        None,
                        describe_operation(wrapper),
                        scan_declared_handlers(owner),
                        observer=observer,
                    )
                return handlers_by_owner[owner]

        @functools.wraps(f)
        def wrapper(self: Any, *args: Any) -> Any:
            return executor.execute(
                functools.partial(f, self),
                args,
                recoverer=handler_for(type(self)).bind(self),
                operation_name=f.__qualname__,
            )

        setattr(wrapper, RETRYABLE_ATTRIBUTE, spec)
        return wrapper

    if func is not None:
        return decorate(func)
    return decorate
