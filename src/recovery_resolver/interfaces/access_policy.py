"""
Access Policy Protocol.

Controls whether a handler may be called from the resolver's context.
The invoker reads the current state, grants access for the duration of
one call, and restores the previous state afterwards.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class AccessPolicy(Protocol):
    """Abstract interface for handler call permission."""

    def is_accessible(self, handler: Callable[..., Any]) -> bool:
        """Check whether the handler is currently callable."""
        ...

    def set_accessible(self, handler: Callable[..., Any], accessible: bool) -> None:
        """Grant or revoke call permission for the handler."""
        ...
