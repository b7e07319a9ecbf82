"""
Resolution Package - Selecting and Running a Recovery Handler.

    - HandlerResolver: Named-mode and distance-mode selection, argument shaping
    - RecoveryHandler: recover(args, cause) entry point
    - retryable: Decorator wiring retries and recovery onto a method
"""

from recovery_resolver.resolution.handler_resolver import HandlerResolver
from recovery_resolver.resolution.recovery_handler import RecoveryHandler
from recovery_resolver.resolution.retryable import retryable

__all__ = ["HandlerResolver", "RecoveryHandler", "retryable"]
