"""
Type Hierarchy Protocol.

Abstract view of a single-rooted exception type hierarchy. The resolver
only ever walks upward toward the root.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TypeHierarchy(Protocol):
    """Abstract interface for type-system queries."""

    @property
    def root(self) -> type:
        """Distinguished root of the exception hierarchy."""
        ...

    def is_assignable(self, target: type, source: type) -> bool:
        """
        Check whether a value of type source can be used where target is expected.

        Args:
            target: Declared (wider) type
            source: Actual (narrower) type

        Returns:
            True if source is target or one of its subtypes
        """
        ...

    def superclass_of(self, cls: type) -> type:
        """
        Get the direct superclass of a type.

        The root's superclass is undefined; callers stop at the root.
        """
        ...

    def is_exception_type(self, cls: type) -> bool:
        """Check whether cls belongs to the exception hierarchy."""
        ...
