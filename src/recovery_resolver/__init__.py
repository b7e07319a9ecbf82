"""
Recovery Resolver - Closest-Match Fallback Handlers for Failed Operations.

After a primary operation has used up its retries, the resolver picks the
single recovery handler that best matches the terminal exception and the
original call arguments, then invokes it with the right argument list.

Architecture:
    - Ports & Adapters: the core only talks to typing.Protocol interfaces
    - Declarative registration instead of runtime discovery in the core
    - Configuration-driven retry behavior via YAML

Main Components:
    - domain: HandlerMetadata, HandlerDescriptor, PrimaryOperation
    - interfaces: TypeHierarchy, AccessPolicy, Invoker, Recoverer protocols
    - adapters: Python implementations of the interfaces
    - registry: HandlerRegistry, HandlerIndex, @recover
    - resolution: HandlerResolver, RecoveryHandler, @retryable
    - resilience: RetryExecutor and the error taxonomy
    - config: Configuration models and loaders
    - observability: Structured recovery events

Example:
    >>> from recovery_resolver import RecoveryHandler, PrimaryOperation, HandlerRegistry
    >>> registry = HandlerRegistry()
    >>> registry.register(on_timeout, parameter_types=(TimeoutError, str), return_type=str)
    >>> handler = RecoveryHandler(None, PrimaryOperation("fetch", str), registry.descriptors())
    >>> handler.recover(["key"], TimeoutError("slow upstream"))

"""

import logging

from recovery_resolver.domain.metadata import (
    HandlerDescriptor,
    HandlerMetadata,
    PrimaryOperation,
)
from recovery_resolver.registry import HandlerIndex, HandlerRegistry, recover
from recovery_resolver.resilience import (
    RecoveryError,
    RecoveryExhausted,
    RetryExecutor,
    RetryExhausted,
)
from recovery_resolver.resolution import HandlerResolver, RecoveryHandler, retryable

__version__ = "0.1.0"

__all__ = [
    "HandlerDescriptor",
    "HandlerIndex",
    "HandlerMetadata",
    "HandlerRegistry",
    "HandlerResolver",
    "PrimaryOperation",
    "RecoveryError",
    "RecoveryExhausted",
    "RecoveryHandler",
    "RetryExecutor",
    "RetryExhausted",
    "configure_logging",
    "recover",
    "retryable",
]


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for the recovery resolver.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import recovery_resolver
        >>> recovery_resolver.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("recovery_resolver").setLevel(level)
