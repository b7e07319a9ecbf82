"""
Resilience Package - Retry Execution and Recovery Errors.

This package provides the failure side of the recovery path:
    - RetryExecutor: Retry with backoff, then delegate to a recoverer
    - RecoveryExhausted: No recovery handler matched
    - RetryExhausted: Retries failed and nothing could recover

Design Principles:
    - Fail fast for non-retryable errors
    - Retry with backoff for transient errors
    - Never swallow the original exception: it is always the cause
"""

from recovery_resolver.resilience.errors import (
    RecoveryError,
    RecoveryExhausted,
    RetryExhausted,
)
from recovery_resolver.resilience.retry_executor import RetryExecutor

__all__ = ["RecoveryError", "RecoveryExhausted", "RetryExhausted", "RetryExecutor"]
