"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from recovery_resolver.adapters.type_hierarchy import PythonTypeHierarchy
from recovery_resolver.config.models import ResolverConfig, RetryConfig
from recovery_resolver.observability.observability_manager import ObservabilityManager
from recovery_resolver.registry.handler_registry import HandlerRegistry


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def hierarchy() -> PythonTypeHierarchy:
    """Default Python exception hierarchy."""
    return PythonTypeHierarchy()


@pytest.fixture
def registry() -> HandlerRegistry:
    """Empty handler registry."""
    return HandlerRegistry()


@pytest.fixture
def observer() -> ObservabilityManager:
    """Observability manager with console rendering."""
    return ObservabilityManager(service_name="test_service", use_json=False)


@pytest.fixture
def default_config() -> ResolverConfig:
    """Create default resolver configuration."""
    return ResolverConfig()


@pytest.fixture
def fast_retry_config() -> RetryConfig:
    """Retry configuration without delays."""
    return RetryConfig(max_attempts=3, base_delay_seconds=0.0)
