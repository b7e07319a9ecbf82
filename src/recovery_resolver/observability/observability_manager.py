"""
Observability Manager - Structured Recovery Events.

Provides:
    - Structured JSON logging via structlog
    - Correlation ID propagation
    - Counters for recovery outcomes

Design Notes:
    - Correlation ID stored in a ContextVar
    - Event and metric buffers are lock-guarded so concurrent recoveries
      can share one manager
"""

from __future__ import annotations

import logging
import threading
import uuid
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import structlog

from recovery_resolver.config.models import ObservabilityConfig

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


class ObservabilityManager:
    """
    Structured logging and counters for the recovery path.

    Every event is kept in memory (for inspection and tests) and emitted
    through structlog.
    """

    def __init__(
        self,
        service_name: str = "recovery_resolver",
        use_json: bool = True,
        log_level: int = logging.INFO,
    ) -> None:
        """
        Initialize observability manager.

        Args:
            service_name: Service name for log entries
            use_json: Render JSON lines instead of console output
            log_level: Minimum level emitted
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

        self._configure_structlog()
        self._logger = structlog.get_logger(service_name)

    @classmethod
    def from_config(cls, config: ObservabilityConfig) -> Optional[ObservabilityManager]:
        """
        Create a manager from validated configuration.

        Returns:
            Manager, or None when observability is disabled. Components
            treat a None observer as "emit nothing".
        """
        if not config.enabled:
            return None
        return cls(
            service_name=config.service_name,
            use_json=config.use_json,
            log_level=config.level_number,
        )

    def _configure_structlog(self) -> None:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if self.use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(self.log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=False,
        )

    def set_correlation_id(self, correlation_id: str) -> None:
        """
        Set correlation ID for current context.

        Args:
            correlation_id: Unique ID for request tracing
        """
        set_correlation_id(correlation_id)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

    def generate_correlation_id(self) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())
        self.set_correlation_id(correlation_id)
        return correlation_id

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Log a structured event.

        Args:
            event_type: Type of event (e.g., "handler_selected")
            data: Additional event data
            level: Log level (debug, info, warning, error)
        """
        event_data = {
            "event_type": event_type,
            "timestamp": datetime.now().isoformat(),
            "correlation_id": get_correlation_id(),
            **(data or {}),
        }

        with self._lock:
            self._events.append(event_data)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        log_method(event_type, **{k: v for k, v in event_data.items() if k != "event_type"})

    def record_count(
        self,
        name: str,
        value: int = 1,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Record a counter increment.

        Args:
            name: Metric name
            value: Increment
            tags: Additional tags/labels
        """
        metric_entry = {
            "timestamp": datetime.now().isoformat(),
            "value": float(value),
            "tags": tags or {},
            "type": "counter",
            "correlation_id": get_correlation_id(),
        }

        with self._lock:
            self._metrics.setdefault(name, []).append(metric_entry)

    def count_total(self, name: str) -> float:
        """Sum of all increments recorded for a counter."""
        with self._lock:
            return sum(entry["value"] for entry in self._metrics.get(name, []))

    # =========================================================================
    # Recovery events
    # =========================================================================

    def log_handler_selected(
        self,
        operation: str,
        handler_name: str,
        cause: BaseException,
    ) -> None:
        """Record that a recovery handler was chosen."""
        self.log_event(
            "handler_selected",
            {
                "operation": operation,
                "handler": handler_name,
                "exception_type": type(cause).__name__,
            },
        )
        self.record_count("recovery_selected_total", tags={"operation": operation})

    def log_recovery_exhausted(
        self,
        operation: str,
        cause: BaseException,
        candidates: Sequence[str] = (),
    ) -> None:
        """Record that no handler matched."""
        self.log_event(
            "recovery_exhausted",
            {
                "operation": operation,
                "exception_type": type(cause).__name__,
                "message": str(cause),
                "candidates": list(candidates),
            },
            level="error",
        )
        self.record_count("recovery_exhausted_total", tags={"operation": operation})

    def log_retry_attempt(
        self,
        operation: str,
        attempt: int,
        max_attempts: int,
        error: BaseException,
    ) -> None:
        """Record a failed attempt of the primary operation."""
        self.log_event(
            "retry_attempt_failed",
            {
                "operation": operation,
                "attempt": attempt,
                "max_attempts": max_attempts,
                "exception_type": type(error).__name__,
            },
            level="warning",
        )

    def get_trace_context(self) -> Dict[str, Any]:
        """Get current trace context."""
        return {
            "correlation_id": get_correlation_id(),
            "service_name": self.service_name,
            "timestamp": datetime.now().isoformat(),
        }

    def get_metrics(self) -> Dict[str, List[Dict[str, Any]]]:
        """Get all recorded metrics."""
        with self._lock:
            return dict(self._metrics)

    def get_events(self) -> List[Dict[str, Any]]:
        """Get all recorded events."""
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        """Clear all recorded metrics and events."""
        with self._lock:
            self._metrics.clear()
            self._events.clear()
