"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the recovery resolver:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - ResolverConfig: Root configuration object
    - RetryConfig: Attempts and backoff before recovery
    - ObservabilityConfig: Structured event logging
"""

from recovery_resolver.config.loader import ConfigLoader, load_config
from recovery_resolver.config.models import (
    ObservabilityConfig,
    ResolverConfig,
    RetryConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "ObservabilityConfig",
    "ResolverConfig",
    "RetryConfig",
]
