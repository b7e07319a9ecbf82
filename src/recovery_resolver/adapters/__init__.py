"""
Adapters Layer - Default Collaborator Implementations.

Concrete implementations of the interfaces protocols for plain Python:
    - PythonTypeHierarchy: Exception classes rooted at BaseException
    - AttributeAccessPolicy: Privacy by leading underscore
    - MethodInvoker: Binds and calls handlers with scoped access
"""

from recovery_resolver.adapters.access_policy import AttributeAccessPolicy
from recovery_resolver.adapters.invoker import MethodInvoker
from recovery_resolver.adapters.type_hierarchy import PythonTypeHierarchy, normalize_type

__all__ = [
    "AttributeAccessPolicy",
    "MethodInvoker",
    "PythonTypeHierarchy",
    "normalize_type",
]
