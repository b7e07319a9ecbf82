"""
Python Type Hierarchy.

Implements the TypeHierarchy protocol over real Python classes. The
upward walk follows __base__ (the primary base), so a type reachable only
through a secondary base of a multiply-inherited exception is never hit
by the walk and the distance runs on to the root.
"""

from __future__ import annotations

import inspect
import types
from typing import Any, Union, get_origin

NoneType = type(None)


def normalize_type(annotation: Any) -> type:
    """
    Reduce a type annotation to a class usable in assignability checks.

    Args:
        annotation: Resolved annotation (or inspect.Parameter.empty)

    Returns:
        None -> NoneType, generic alias -> its origin class,
        anything else that is not a class (Any, Union, TypeVar) -> object.
        Classes that refuse issubclass() (non-runtime Protocols,
        data Protocols, TypedDicts) also become object.
    """
    if annotation is None:
        return NoneType
    if annotation is inspect.Parameter.empty:
        return object
    origin = get_origin(annotation)
    if origin is not None and origin not in (Union, types.UnionType):
        annotation = origin
    if isinstance(annotation, type) and _supports_subclass_check(annotation):
        return annotation
    return object


def _supports_subclass_check(cls: type) -> bool:
    try:
        issubclass(object, cls)
    except TypeError:
        return False
    return True


class PythonTypeHierarchy:
    """Exception hierarchy of the running interpreter."""

    def __init__(self, root: type = BaseException) -> None:
        """
        Initialize hierarchy.

        Args:
            root: Topmost exception type (default: BaseException)
        """
        self._root = root

    @property
    def root(self) -> type:
        return self._root

    def is_assignable(self, target: type, source: type) -> bool:
        if not (isinstance(target, type) and isinstance(source, type)):
            return False
        if not _supports_subclass_check(target):
            # treated like an unannotated slot
            return True
        return issubclass(source, target)

    def superclass_of(self, cls: type) -> type:
        base = cls.__base__
        return base if base is not None else cls

    def is_exception_type(self, cls: type) -> bool:
        return self.is_assignable(self._root, cls)
