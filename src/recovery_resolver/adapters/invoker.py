"""
Method Invoker.

Binds a resolved handler to its owning instance and calls it. Call
access is granted for exactly one invocation and the previous state is
restored on every exit path, including when the handler raises.

Grants are counted per function across all invokers: concurrent
recoveries through the same private handler share one grant, and access
is revoked only when the last of them returns.

Binding follows the descriptor protocol, so with a receiver a plain
function is called as a method of it. Free functions used with a
receiver must be registered as staticmethod(func).
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, ClassVar, Dict, Optional, Sequence

from recovery_resolver.adapters.access_policy import AttributeAccessPolicy
from recovery_resolver.interfaces.access_policy import AccessPolicy

logger = logging.getLogger(__name__)


class MethodInvoker:
    """Invokes handlers through the descriptor protocol."""

    _grant_lock: ClassVar[threading.Lock] = threading.Lock()
    _grant_holders: ClassVar[Dict[Any, int]] = {}

    def __init__(self, access_policy: Optional[AccessPolicy] = None) -> None:
        """
        Initialize invoker.

        Args:
            access_policy: Policy consulted around each call
                (default: AttributeAccessPolicy)
        """
        self._access_policy = access_policy or AttributeAccessPolicy()

    def invoke(
        self,
        handler: Callable[..., Any],
        receiver: Optional[Any],
        args: Sequence[Any],
    ) -> Any:
        """
        Invoke handler with scoped access.

        Args:
            handler: Function, staticmethod or classmethod object
            receiver: Instance to bind to, None to call unbound
            args: Positional arguments

        Returns:
            Handler result; handler errors propagate unchanged
        """
        key = getattr(handler, "__func__", handler)
        granted = self._acquire(handler, key)
        try:
            return self._bind(handler, receiver)(*args)
        finally:
            if granted:
                self._release(handler, key)

    def _acquire(self, handler: Callable[..., Any], key: Any) -> bool:
        with self._grant_lock:
            holders = self._grant_holders.get(key)
            if holders is not None:
                self._grant_holders[key] = holders + 1
                return True
            if self._access_policy.is_accessible(handler):
                return False
            logger.debug(f"Granting temporary access to {handler!r}")
            self._access_policy.set_accessible(handler, True)
            self._grant_holders[key] = 1
            return True

    def _release(self, handler: Callable[..., Any], key: Any) -> None:
        with self._grant_lock:
            holders = self._grant_holders[key] - 1
            if holders:
                self._grant_holders[key] = holders
                return
            del self._grant_holders[key]
            self._access_policy.set_accessible(handler, False)

    @staticmethod
    def _bind(handler: Callable[..., Any], receiver: Optional[Any]) -> Callable[..., Any]:
        if receiver is None or not hasattr(handler, "__get__"):
            return handler
        return handler.__get__(receiver, type(receiver))
