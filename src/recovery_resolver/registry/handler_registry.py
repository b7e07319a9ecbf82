"""
Handler Registry - Declarative Recovery Handler Registration.

Explicit registration table for recovery handlers, populated once at
setup time and then handed to a RecoveryHandler.

Usage:
    registry = HandlerRegistry()
    registry.register(on_timeout, parameter_types=(TimeoutError, str), return_type=str)
    registry.register(fallback, parameter_types=(str,), return_type=str, name="fallback")

    handler = RecoveryHandler(service, operation, registry.descriptors())
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from recovery_resolver.domain.metadata import HandlerDescriptor

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """
    Ordered registration table of handler descriptors.

    Registration order is the order the resolver scans candidates in.
    """

    def __init__(self, descriptors: Optional[Sequence[HandlerDescriptor]] = None) -> None:
        """
        Initialize registry.

        Args:
            descriptors: Optional descriptors to register up front
        """
        self._descriptors: Dict[HandlerDescriptor, None] = {}
        for descriptor in descriptors or ():
            self.register_descriptor(descriptor)

    def register(
        self,
        handler: Callable[..., Any],
        parameter_types: Sequence[type] = (),
        return_type: type = object,
        name: str = "",
    ) -> HandlerDescriptor:
        """
        Register a recovery handler.

        Args:
            handler: Callable to run on recovery. Plain functions are bound
                to the receiver like methods; wrap a free function in
                staticmethod() when a receiver is used
            parameter_types: Declared parameter types, receiver excluded;
                a leading exception type makes it a typed handler
            return_type: Declared return type
            name: Explicit logical name (default: the handler's __name__)

        Returns:
            The registered descriptor

        Raises:
            ValueError: If the same declaration is already registered
        """
        descriptor = HandlerDescriptor(
            handler=handler,
            parameter_types=tuple(parameter_types),
            return_type=return_type,
            name=name,
        )
        return self.register_descriptor(descriptor)

    def register_descriptor(self, descriptor: HandlerDescriptor) -> HandlerDescriptor:
        """Register a prepared descriptor."""
        if descriptor in self._descriptors:
            raise ValueError(
                f"Handler '{descriptor.logical_name}' is already registered "
                f"with the same declaration."
            )
        self._descriptors[descriptor] = None
        logger.debug(f"Registered recovery handler: {descriptor.logical_name}")
        return descriptor

    def unregister(self, handler: Callable[..., Any]) -> int:
        """
        Remove every registration of a handler.

        Returns:
            Number of descriptors removed
        """
        doomed = [d for d in self._descriptors if d.handler is handler]
        for descriptor in doomed:
            del self._descriptors[descriptor]
        if not doomed:
            logger.warning(f"Cannot unregister: handler {handler!r} not found")
        return len(doomed)

    def descriptors(self) -> List[HandlerDescriptor]:
        """All descriptors in registration order."""
        return list(self._descriptors)

    @property
    def registered_count(self) -> int:
        return len(self._descriptors)

    def clear(self) -> None:
        """Remove all registered handlers."""
        self._descriptors.clear()
