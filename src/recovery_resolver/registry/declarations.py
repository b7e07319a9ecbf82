"""
Declarations - Decorators That Mark Recovery Handlers and Primary Operations.

    class PaymentClient:
        @retryable(recover="offline_quote")
        def quote(self, sku: str) -> float:
            ...

        @recover(name="offline_quote")
        def _cached_quote(self, error: ConnectionError, sku: str) -> float:
            ...

@recover only attaches a marker; scan_declared_handlers turns the marked
members of a class into HandlerDescriptors using resolved type hints.
@retryable lives in recovery_resolver.resolution.retryable and stores a
RetryableSpec under RETRYABLE_ATTRIBUTE.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, get_type_hints

from recovery_resolver.adapters.type_hierarchy import normalize_type
from recovery_resolver.domain.metadata import HandlerDescriptor, PrimaryOperation

logger = logging.getLogger(__name__)

RECOVER_ATTRIBUTE = "__recover_spec__"
RETRYABLE_ATTRIBUTE = "__retryable_spec__"

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class RecoverSpec:
    """Marker stored on a recovery handler."""

    name: str = ""


@dataclass(frozen=True)
class RetryableSpec:
    """Marker stored on a primary operation."""

    recover: str = ""
    max_attempts: Optional[int] = None
    retry_on: Tuple[type, ...] = (Exception,)


def recover(func: Optional[Callable[..., Any]] = None, *, name: str = "") -> Any:
    """
    Mark a method as a recovery handler.

    Usable bare (@recover) or with an explicit logical name
    (@recover(name="fallback")).
    """

    def decorate(f: Callable[..., Any]) -> Callable[..., Any]:
        target = getattr(f, "__func__", f)
        setattr(target, RECOVER_ATTRIBUTE, RecoverSpec(name=name))
        return f

    if func is not None:
        return decorate(func)
    return decorate


def scan_declared_handlers(owner: type) -> List[HandlerDescriptor]:
    """
    Collect the recovery handlers declared on a class and its bases.

    The MRO is walked subclass first and every attribute name is taken
    once, in its most derived definition. A marker is inherited: an
    override without @recover is still a handler when a base class marks
    that name, and the override is what gets described and invoked.

    Args:
        owner: Class that owns the handlers

    Returns:
        Descriptors in declaration order, most derived class first
    """
    attrs: Dict[str, Any] = {}
    specs: Dict[str, RecoverSpec] = {}

    for klass in owner.__mro__:
        for attr_name, attr in vars(klass).items():
            attrs.setdefault(attr_name, attr)
            spec = getattr(getattr(attr, "__func__", attr), RECOVER_ATTRIBUTE, None)
            if isinstance(spec, RecoverSpec):
                specs.setdefault(attr_name, spec)

    descriptors: List[HandlerDescriptor] = []
    for attr_name, attr in attrs.items():
        func = getattr(attr, "__func__", attr)
        if attr_name not in specs or not callable(func):
            continue
        descriptors.append(_describe_handler(attr, func, specs[attr_name]))

    logger.debug(f"Found {len(descriptors)} recovery handler(s) on {owner.__name__}")
    return descriptors


def _describe_handler(attr: Any, func: Callable[..., Any], spec: RecoverSpec) -> HandlerDescriptor:
    hints = get_type_hints(func)
    params = [
        p for p in inspect.signature(func).parameters.values() if p.kind in _POSITIONAL
    ]
    if not isinstance(attr, staticmethod):
        # self or cls
        params = params[1:]
    return HandlerDescriptor(
        handler=attr,
        parameter_types=tuple(
            normalize_type(hints.get(p.name, inspect.Parameter.empty)) for p in params
        ),
        return_type=normalize_type(hints.get("return", inspect.Parameter.empty)),
        name=spec.name,
    )


def describe_operation(method: Callable[..., Any]) -> PrimaryOperation:
    """
    Build the PrimaryOperation for a (possibly @retryable-wrapped) method.

    Args:
        method: Function or bound method

    Returns:
        PrimaryOperation carrying the return type and preferred handler name
    """
    func = getattr(method, "__func__", method)
    spec = getattr(func, RETRYABLE_ATTRIBUTE, None)
    target = inspect.unwrap(func)
    hints = get_type_hints(target)
    return PrimaryOperation(
        name=target.__name__,
        return_type=normalize_type(hints.get("return", inspect.Parameter.empty)),
        recover_name=spec.recover if isinstance(spec, RetryableSpec) else "",
    )
