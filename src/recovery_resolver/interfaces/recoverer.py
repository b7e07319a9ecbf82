"""
Recoverer Protocol.

What the retry loop calls once it gives up on the primary operation.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Recoverer(Protocol[T_co]):
    """Abstract interface for post-retry recovery."""

    def recover(self, args: Sequence[Any], cause: BaseException) -> T_co:
        """
        Produce a result for a failed call.

        Args:
            args: Original call arguments
            cause: Last exception raised by the primary operation
        """
        ...
