"""
Handler Scanner Protocol.

Produces the declared recovery handlers of an owning type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from recovery_resolver.domain.metadata import HandlerDescriptor


@runtime_checkable
class HandlerScanner(Protocol):
    """Abstract interface for handler discovery."""

    def __call__(self, owner: type) -> List[HandlerDescriptor]:
        """Return descriptors for every recovery handler declared on owner."""
        ...
