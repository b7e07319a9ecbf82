"""
Domain Layer - Recovery Handler Metadata.

Value objects the resolver operates on:
    - HandlerMetadata: Selection-relevant facts about one handler
    - HandlerDescriptor: Declarative registration record for a handler
    - PrimaryOperation: Signature of the guarded operation
"""

from recovery_resolver.domain.metadata import (
    HandlerDescriptor,
    HandlerMetadata,
    PrimaryOperation,
)

__all__ = ["HandlerDescriptor", "HandlerMetadata", "PrimaryOperation"]
