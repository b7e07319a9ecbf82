"""
Recovery Errors.

Exception taxonomy for the recovery path:
    - RecoveryExhausted: No handler matched; fatal, never retried
    - RetryExhausted: Retry loop gave up and no recoverer was supplied

Errors raised by a handler's own body are not wrapped and never appear
here.
"""

from __future__ import annotations

from typing import Optional


class RecoveryError(Exception):
    """Base class for recovery path failures."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class RecoveryExhausted(RecoveryError):
    """Raised when no recovery handler matches the terminal exception."""
    pass


class RetryExhausted(RecoveryError):
    """Raised when all retry attempts are exhausted."""
    pass
