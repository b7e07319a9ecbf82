"""
Observability Package - Structured Recovery Events.

    - ObservabilityManager: structlog events with correlation IDs and
      counters for selected and exhausted recoveries
"""

from recovery_resolver.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)

__all__ = ["ObservabilityManager", "get_correlation_id", "set_correlation_id"]
