"""
Attribute Access Policy.

Python has no enforced method visibility, so privacy follows the naming
convention: a handler whose name starts with an underscore is not
accessible until explicitly granted. Grants are stored on the underlying
function object and can be revoked by setting them back.
"""

from __future__ import annotations

from typing import Any, Callable

ACCESS_ATTRIBUTE = "__recovery_accessible__"


class AttributeAccessPolicy:
    """Access policy backed by a function attribute."""

    def is_accessible(self, handler: Callable[..., Any]) -> bool:
        func = self._unwrap(handler)
        granted = getattr(func, ACCESS_ATTRIBUTE, None)
        if granted is not None:
            return bool(granted)
        return not getattr(func, "__name__", "").startswith("_")

    def set_accessible(self, handler: Callable[..., Any], accessible: bool) -> None:
        func = self._unwrap(handler)
        # builtins and slotted callables cannot carry the flag
        if hasattr(func, "__dict__"):
            setattr(func, ACCESS_ATTRIBUTE, accessible)

    @staticmethod
    def _unwrap(handler: Callable[..., Any]) -> Any:
        return getattr(handler, "__func__", handler)
