"""
Registry Module - Recovery Handler Registration and Indexing.

Components:
    - HandlerRegistry: Explicit registration table
    - HandlerIndex: Eligible handlers of one primary operation
    - recover / scan_declared_handlers: Decorator-based declaration
"""

from recovery_resolver.registry.declarations import (
    RecoverSpec,
    RetryableSpec,
    describe_operation,
    recover,
    scan_declared_handlers,
)
from recovery_resolver.registry.handler_index import HandlerIndex
from recovery_resolver.registry.handler_registry import HandlerRegistry

__all__ = [
    "HandlerIndex",
    "HandlerRegistry",
    "RecoverSpec",
    "RetryableSpec",
    "describe_operation",
    "recover",
    "scan_declared_handlers",
]
