"""
Unit Tests for ObservabilityManager.

Test Aspects Covered:
    ✅ Business Logic: Correlation IDs, structured events, counters
    ✅ State: clear() resets buffers
"""

from __future__ import annotations

import pytest

from recovery_resolver.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
)
from tests.fixtures.errors import TimeoutFailure


class TestCorrelationIds:
    """Test correlation ID management."""

    def test_set_and_get_correlation_id(self, observer: ObservabilityManager) -> None:
        """
        SCENARIO: Set correlation ID
        EXPECTED: Can retrieve same ID
        """
        observer.set_correlation_id("test-123")

        assert get_correlation_id() == "test-123"

    def test_generate_correlation_id(self, observer: ObservabilityManager) -> None:
        """
        SCENARIO: Generate new correlation ID
        EXPECTED: UUID format, set in context
        """
        correlation_id = observer.generate_correlation_id()

        assert len(correlation_id) == 36
        assert get_correlation_id() == correlation_id

    def test_correlation_id_on_events(self, observer: ObservabilityManager) -> None:
        observer.set_correlation_id("trace-456")

        observer.log_event("probe")

        assert observer.get_events()[-1]["correlation_id"] == "trace-456"
        assert observer.get_trace_context()["service_name"] == "test_service"


class TestRecoveryEvents:
    """Test recovery-specific events."""

    def test_handler_selected(self, observer: ObservabilityManager) -> None:
        observer.log_handler_selected("stock", "from_cache", TimeoutFailure())

        event = observer.get_events()[-1]
        assert event["event_type"] == "handler_selected"
        assert event["operation"] == "stock"
        assert event["handler"] == "from_cache"
        assert observer.count_total("recovery_selected_total") == 1

    def test_recovery_exhausted(self, observer: ObservabilityManager) -> None:
        observer.log_recovery_exhausted("stock", TimeoutFailure("slow"), ["a", "b"])

        event = observer.get_events()[-1]
        assert event["message"] == "slow"
        assert event["candidates"] == ["a", "b"]
        assert observer.count_total("recovery_exhausted_total") == 1

    def test_counters_accumulate(self, observer: ObservabilityManager) -> None:
        observer.record_count("recovery_selected_total", tags={"operation": "a"})
        observer.record_count("recovery_selected_total", 2, tags={"operation": "b"})

        assert observer.count_total("recovery_selected_total") == 3
        assert observer.count_total("never_recorded") == 0

    @pytest.mark.parametrize("use_json", [True, False])
    def test_renderers(self, use_json: bool) -> None:
        manager = ObservabilityManager(use_json=use_json)

        manager.log_event("probe", {"value": 1}, level="warning")

        assert manager.get_events()[0]["value"] == 1

    def test_clear(self, observer: ObservabilityManager) -> None:
        observer.log_event("probe")
        observer.record_count("x")

        observer.clear()

        assert observer.get_events() == []
        assert observer.get_metrics() == {}
