"""
Handler Index - Eligible Recovery Handlers of One Primary Operation.

Built once from the declared handlers and then read-only:
    1. Keep handlers whose declared return type accepts the primary
       operation's return type
    2. Derive HandlerMetadata (leading exception parameter, argument
       count, logical name)
    3. Narrow to handlers returning exactly the primary return type, unless
       that leaves nothing
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from recovery_resolver.domain.metadata import (
    HandlerDescriptor,
    HandlerMetadata,
    PrimaryOperation,
)
from recovery_resolver.interfaces.type_hierarchy import TypeHierarchy

logger = logging.getLogger(__name__)


class HandlerIndex:
    """Immutable mapping of handler descriptor to selection metadata."""

    def __init__(self, entries: Optional[Dict[HandlerDescriptor, HandlerMetadata]] = None) -> None:
        self._entries: Dict[HandlerDescriptor, HandlerMetadata] = dict(entries or {})

    @classmethod
    def build(
        cls,
        descriptors: Iterable[HandlerDescriptor],
        operation: PrimaryOperation,
        hierarchy: TypeHierarchy,
    ) -> HandlerIndex:
        """
        Build the index for one primary operation.

        Args:
            descriptors: Declared handlers of the owning context
            operation: Signature of the guarded operation
            hierarchy: Type system used for return and exception checks

        Returns:
            Populated (possibly empty) HandlerIndex
        """
        entries: Dict[HandlerDescriptor, HandlerMetadata] = {}

        for descriptor in descriptors:
            if not hierarchy.is_assignable(descriptor.return_type, operation.return_type):
                logger.debug(
                    f"Skipping {descriptor.logical_name}: returns "
                    f"{descriptor.return_type.__name__}, operation {operation.name} "
                    f"returns {operation.return_type.__name__}"
                )
                continue
            if descriptor in entries:
                logger.debug(f"Ignoring duplicate declaration of {descriptor.logical_name}")
                continue
            entries[descriptor] = cls._describe(descriptor, hierarchy)

        entries = cls._filter_by_return_type(entries, operation.return_type)

        if not entries:
            logger.warning(f"No recovery handlers eligible for {operation.name}")
        else:
            logger.debug(
                f"Indexed {len(entries)} recovery handler(s) for {operation.name}: "
                f"{[m.name for m in entries.values()]}"
            )
        return cls(entries)

    @staticmethod
    def _describe(descriptor: HandlerDescriptor, hierarchy: TypeHierarchy) -> HandlerMetadata:
        first = descriptor.first_parameter
        exception_type = first if first is not None and hierarchy.is_exception_type(first) else None
        return HandlerMetadata(
            arg_count=len(descriptor.parameter_types),
            exception_type=exception_type,
            name=descriptor.logical_name,
        )

    @staticmethod
    def _filter_by_return_type(
        entries: Dict[HandlerDescriptor, HandlerMetadata],
        return_type: type,
    ) -> Dict[HandlerDescriptor, HandlerMetadata]:
        """Prefer handlers whose return type is exactly the operation's."""
        exact = {d: m for d, m in entries.items() if d.return_type is return_type}
        if exact:
            return exact
        return entries

    def get(self, descriptor: HandlerDescriptor) -> Optional[HandlerMetadata]:
        return self._entries.get(descriptor)

    def __getitem__(self, descriptor: HandlerDescriptor) -> HandlerMetadata:
        return self._entries[descriptor]

    def __contains__(self, descriptor: object) -> bool:
        return descriptor in self._entries

    def __iter__(self) -> Iterator[HandlerDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> Iterator[Tuple[HandlerDescriptor, HandlerMetadata]]:
        return iter(self._entries.items())

    def list_all(self) -> Mapping[HandlerDescriptor, HandlerMetadata]:
        """Read-only view of all entries."""
        return MappingProxyType(self._entries)

    @property
    def names(self) -> List[str]:
        return [meta.name for meta in self._entries.values()]
