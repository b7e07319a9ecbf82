"""
Invoker Protocol.

Executes a resolved recovery handler against its owning instance.
Errors raised by the handler body propagate uncaught.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Invoker(Protocol):
    """Abstract interface for handler invocation."""

    def invoke(
        self,
        handler: Callable[..., Any],
        receiver: Optional[Any],
        args: Sequence[Any],
    ) -> Any:
        """
        Invoke handler bound to receiver with positional args.

        Args:
            handler: Unbound function or plain callable
            receiver: Owning instance, None for free functions
            args: Positional arguments

        Returns:
            Whatever the handler returns
        """
        ...
