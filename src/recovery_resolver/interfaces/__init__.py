"""
Interfaces Layer - Protocols for Recovery Collaborators.

The resolver core depends only on these abstractions:
    - TypeHierarchy: Assignability and superclass queries
    - AccessPolicy: Call permission toggling around invocation
    - Invoker: Executes a resolved handler
    - HandlerScanner: Produces handler descriptors for an owner
    - Recoverer: What the retry loop calls once it gives up

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Small, focused interfaces
"""

from recovery_resolver.interfaces.access_policy import AccessPolicy
from recovery_resolver.interfaces.handler_scanner import HandlerScanner
from recovery_resolver.interfaces.invoker import Invoker
from recovery_resolver.interfaces.recoverer import Recoverer
from recovery_resolver.interfaces.type_hierarchy import TypeHierarchy

__all__ = ["AccessPolicy", "HandlerScanner", "Invoker", "Recoverer", "TypeHierarchy"]
