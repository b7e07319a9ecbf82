"""
Handler Metadata - Value Objects for Recovery Resolution.

A recovery handler is described twice:
    - HandlerDescriptor is what gets registered (the callable plus its
      declared parameter and return types)
    - HandlerMetadata is what the resolver ranks on (argument count,
      accepted exception type, logical name)

Both are immutable once created.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field


class HandlerMetadata(BaseModel):
    """Selection metadata for a single recovery handler."""

    arg_count: int = Field(..., ge=0, description="Total declared parameters")
    exception_type: Optional[type] = Field(
        default=None, description="Accepted exception type, None for catch-all"
    )
    name: str = Field(..., description="Explicit or inferred handler name")

    model_config = {"frozen": True}

    @property
    def is_default(self) -> bool:
        """True when the handler declares no exception parameter."""
        return self.exception_type is None

    def get_args(self, cause: BaseException, args: Sequence[Any]) -> List[Any]:
        """
        Build the positional arguments for invoking this handler.

        The cause occupies slot 0 when an exception type is declared.
        Original arguments fill the remaining slots in order; surplus
        arguments are dropped and unfilled slots stay None.

        Args:
            cause: Exception that ended the primary operation
            args: Original call arguments

        Returns:
            List of exactly arg_count values
        """
        result: List[Any] = [None] * self.arg_count
        start = 0
        if self.exception_type is not None and self.arg_count > 0:
            result[0] = cause
            start = 1
        length = min(len(args), self.arg_count - start)
        if length > 0:
            result[start:start + length] = list(args[:length])
        return result


@dataclass(frozen=True)
class HandlerDescriptor:
    """
    Declarative registration record for a recovery handler.

    parameter_types never includes the bound receiver.
    """

    handler: Callable[..., Any]
    parameter_types: Tuple[type, ...] = ()
    return_type: type = object
    name: str = ""

    @property
    def identifier(self) -> str:
        """The handler's own name, used when no explicit name is declared."""
        func = getattr(self.handler, "__func__", self.handler)
        return getattr(func, "__name__", repr(func))

    @property
    def logical_name(self) -> str:
        return self.name or self.identifier

    @property
    def first_parameter(self) -> Optional[type]:
        return self.parameter_types[0] if self.parameter_types else None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "handler": self.identifier,
            "name": self.logical_name,
            "parameter_types": [t.__name__ for t in self.parameter_types],
            "return_type": self.return_type.__name__,
        }


@dataclass(frozen=True)
class PrimaryOperation:
    """Signature of the operation whose failure is being recovered."""

    name: str
    return_type: type = object
    recover_name: str = ""

    @property
    def has_preferred_handler(self) -> bool:
        return self.recover_name != ""
