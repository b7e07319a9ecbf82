"""
Handler Resolver - Closest-Match Selection of a Recovery Handler.

Two selection modes, fixed at construction:

    Named mode (preferred name given):
        First handler in index order whose name matches, whose declared
        exception type accepts the runtime exception, and whose parameters
        accept the original arguments. Catch-all handlers never match.

    Distance mode (no preferred name):
        Every handler whose declared exception type (or the hierarchy root,
        for catch-alls) accepts the runtime exception is ranked by the
        number of superclass steps between the two. The smallest distance
        wins. On a tie the later handler wins only if its parameters accept
        the original arguments.

Parameter compatibility always expects exactly one more declared parameter
than there are original arguments, whether or not the handler declares an
exception parameter.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from recovery_resolver.domain.metadata import HandlerDescriptor
from recovery_resolver.interfaces.type_hierarchy import TypeHierarchy
from recovery_resolver.registry.handler_index import HandlerIndex

logger = logging.getLogger(__name__)


class HandlerResolver:
    """Selects one handler from a HandlerIndex and shapes its arguments."""

    def __init__(
        self,
        index: HandlerIndex,
        hierarchy: TypeHierarchy,
        preferred_name: str = "",
    ) -> None:
        """
        Initialize resolver.

        Args:
            index: Eligible handlers
            hierarchy: Type system for assignability and distance
            preferred_name: Handler name to prefer; empty selects distance mode
        """
        self._index = index
        self._hierarchy = hierarchy
        self._preferred_name = preferred_name

    @property
    def index(self) -> HandlerIndex:
        return self._index

    @property
    def preferred_name(self) -> str:
        return self._preferred_name

    def select(self, cause_type: type, args: Sequence[Any]) -> Optional[HandlerDescriptor]:
        """
        Pick the best handler for an exception type and argument list.

        Args:
            cause_type: Concrete type of the terminal exception
            args: Original call arguments

        Returns:
            Selected descriptor, or None when nothing matches
        """
        if self._preferred_name != "":
            result = self._select_by_name(cause_type, args)
        else:
            result = self._select_by_distance(cause_type, args)

        if result is not None:
            logger.debug(
                f"Selected recovery handler {self._index[result].name} "
                f"for {cause_type.__name__}"
            )
        return result

    def _select_by_name(self, cause_type: type, args: Sequence[Any]) -> Optional[HandlerDescriptor]:
        for descriptor, meta in self._index.items():
            if (
                meta.name == self._preferred_name
                and meta.exception_type is not None
                and self._hierarchy.is_assignable(meta.exception_type, cause_type)
                and self.compare_parameters(args, meta.arg_count, descriptor.parameter_types)
            ):
                return descriptor
        return None

    def _select_by_distance(self, cause_type: type, args: Sequence[Any]) -> Optional[HandlerDescriptor]:
        result: Optional[HandlerDescriptor] = None
        best: Optional[int] = None

        for descriptor, meta in self._index.items():
            target = meta.exception_type or self._hierarchy.root
            if not self._hierarchy.is_assignable(target, cause_type):
                continue
            distance = self.calculate_distance(cause_type, target)
            if best is None or distance < best:
                best = distance
                result = descriptor
            elif distance == best and self.compare_parameters(
                args, meta.arg_count, descriptor.parameter_types
            ):
                result = descriptor

        return result

    def calculate_distance(self, cause_type: type, target: type) -> int:
        """
        Count superclass steps from cause_type up to target.

        The walk stops early at the hierarchy root.
        """
        root = self._hierarchy.root
        result = 0
        current = cause_type
        while current is not target and current is not root:
            parent = self._hierarchy.superclass_of(current)
            if parent is current:
                break
            result += 1
            current = parent
        return result

    def compare_parameters(
        self,
        args: Sequence[Any],
        arg_count: int,
        parameter_types: Sequence[type],
    ) -> bool:
        """
        Check that a handler's parameters accept the original arguments.

        None arguments and positions past the end of args are skipped.
        """
        if arg_count != len(args) + 1:
            return False

        start = 0
        if parameter_types and self._hierarchy.is_exception_type(parameter_types[0]):
            start = 1

        for i in range(start, len(parameter_types)):
            position = i - start
            argument = args[position] if position < len(args) else None
            if argument is None:
                continue
            if not self._hierarchy.is_assignable(parameter_types[i], type(argument)):
                return False
        return True

    def build_args(
        self,
        descriptor: HandlerDescriptor,
        cause: BaseException,
        args: Sequence[Any],
    ) -> List[Any]:
        """Positional arguments for invoking the selected handler."""
        return self._index[descriptor].get_args(cause, args)
