"""
Recovery Handler - Runtime Entry Point for Failed Operations.

Ties together the handler index, the resolver and the invoker for one
primary operation:

    handler = RecoveryHandler(service, operation, registry.descriptors())
    try:
        result = service.fetch(key)
    except ConnectionError as e:
        result = handler.recover([key], e)

recover() raises RecoveryExhausted (chained to the original exception)
when no handler matches. Errors raised by the chosen handler itself
propagate unchanged.

Handlers are bound to the receiver, so registered plain functions must be
methods of its class. Register a free function as staticmethod(func), or
pass receiver=None when every handler is a free function.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Generic, Iterable, Optional, Sequence, TypeVar

from recovery_resolver.adapters.invoker import MethodInvoker
from recovery_resolver.adapters.type_hierarchy import PythonTypeHierarchy
from recovery_resolver.domain.metadata import HandlerDescriptor, PrimaryOperation
from recovery_resolver.interfaces.handler_scanner import HandlerScanner
from recovery_resolver.interfaces.invoker import Invoker
from recovery_resolver.interfaces.type_hierarchy import TypeHierarchy
from recovery_resolver.observability.observability_manager import ObservabilityManager
from recovery_resolver.registry.declarations import describe_operation, scan_declared_handlers
from recovery_resolver.registry.handler_index import HandlerIndex
from recovery_resolver.resilience.errors import RecoveryExhausted
from recovery_resolver.resolution.handler_resolver import HandlerResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecoveryHandler(Generic[T]):
    """
    Recovers a failed primary operation by running the closest handler.

    The index is built once in the constructor and never changes
    afterwards, so one instance may serve concurrent recover() calls and
    bind() can reuse it for other receivers.
    """

    def __init__(
        self,
        receiver: Optional[Any],
        operation: PrimaryOperation,
        handlers: Iterable[HandlerDescriptor],
        hierarchy: Optional[TypeHierarchy] = None,
        invoker: Optional[Invoker] = None,
        observer: Optional[ObservabilityManager] = None,
    ) -> None:
        """
        Initialize recovery handler.

        Args:
            receiver: Instance handlers are bound to (None for free functions)
            operation: Signature of the guarded operation
            handlers: Declared candidate handlers
            hierarchy: Exception type hierarchy (default: PythonTypeHierarchy)
            invoker: Handler invoker (default: MethodInvoker)
            observer: Optional structured event sink
        """
        self._receiver = receiver
        self._operation = operation
        self._hierarchy = hierarchy or PythonTypeHierarchy()
        self._invoker = invoker or MethodInvoker()
        self._observer = observer
        self._index = HandlerIndex.build(handlers, operation, self._hierarchy)
        self._resolver = HandlerResolver(
            self._index, self._hierarchy, operation.recover_name
        )

    @classmethod
    def for_method(
        cls,
        receiver: Any,
        method: Callable[..., Any],
        scanner: HandlerScanner = scan_declared_handlers,
        **kwargs: Any,
    ) -> RecoveryHandler[Any]:
        """
        Create a recovery handler from a decorated method.

        Handlers come from the scanner (default: the @recover members of
        the receiver's class).

        Args:
            receiver: Instance owning the method
            method: Primary operation (function or bound method)
            scanner: Produces the candidate handlers for the receiver's class
            **kwargs: Forwarded to the constructor

        Returns:
            RecoveryHandler for the method
        """
        return cls(
            receiver,
            describe_operation(method),
            scanner(type(receiver)),
            **kwargs,
        )

    def bind(self, receiver: Optional[Any]) -> RecoveryHandler[T]:
        """
        Bind to another receiver without rebuilding the index.

        The copy shares this handler's index, resolver and collaborators.
        """
        bound = copy.copy(self)
        bound._receiver = receiver
        return bound

    @property
    def operation(self) -> PrimaryOperation:
        return self._operation

    @property
    def index(self) -> HandlerIndex:
        return self._index

    def recover(self, args: Sequence[Any], cause: BaseException) -> T:
        """
        Run the best-matching recovery handler.

        Args:
            args: Original call arguments (positional)
            cause: Exception that ended the primary operation

        Returns:
            Result of the recovery handler

        Raises:
            RecoveryExhausted: When no handler matches
        """
        args = list(args)
        descriptor = self._resolver.select(type(cause), args)
        if descriptor is None:
            logger.error(
                f"Cannot locate recovery method for {self._operation.name} "
                f"({type(cause).__name__}: {cause})"
            )
            if self._observer is not None:
                self._observer.log_recovery_exhausted(
                    self._operation.name, cause, self._index.names
                )
            raise RecoveryExhausted("Cannot locate recovery method", cause) from cause

        meta = self._index[descriptor]
        if self._observer is not None:
            self._observer.log_handler_selected(self._operation.name, meta.name, cause)

        args_to_use = self._resolver.build_args(descriptor, cause, args)
        return self._invoker.invoke(descriptor.handler, self._receiver, args_to_use)
