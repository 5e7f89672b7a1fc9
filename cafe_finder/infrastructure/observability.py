"""
Observability for the café finder MCP server.

OpenTelemetry tracing around MCP tool and prompt invocations. Spans go to
whatever tracer provider the process was started with, e.g.:

    opentelemetry-instrument python -m cafe_finder.main

Without an SDK configured the API falls back to no-op spans.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from loguru import logger
from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind, Status, StatusCode


class ObservabilityManager:
    """Creates spans and span events for MCP handlers."""

    def __init__(
        self,
        service_name: str = "cafe-finder-mcp",
        enabled: bool = True,
    ) -> None:
        self.service_name = service_name
        self.enabled = enabled
        self._tracer = None

        if self.enabled:
            self._tracer = trace.get_tracer(
                instrumenting_module_name=service_name,
                tracer_provider=trace.get_tracer_provider(),
            )
            logger.info(f"Observability initialized for service: {service_name}")
        else:
            logger.info("Observability disabled")

    @contextmanager
    def create_span(
        self,
        name: str,
        attributes: Optional[dict] = None,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> Iterator[Optional[Span]]:
        """Open a span around the wrapped block, recording any exception on it."""
        if not self.enabled or self._tracer is None:
            yield None
            return

        with self._tracer.start_as_current_span(
            name=name,
            kind=kind,
            attributes=attributes or {},
        ) as span:
            try:
                yield span
            except Exception as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
                raise

    def add_span_event(self, name: str, attributes: Optional[dict] = None) -> None:
        """Add an event to the current span."""
        if not self.enabled:
            return
        trace.get_current_span().add_event(name, attributes=attributes or {})

    def record_handler_call(
        self,
        handler_name: str,
        handler_type: str,
        duration_ms: float,
        success: bool,
        error: str | None = None,
    ) -> None:
        attributes: dict = {
            "handler.name": handler_name,
            "handler.type": handler_type,
            "handler.duration_ms": duration_ms,
            "handler.success": success,
        }
        if error:
            attributes["handler.error"] = error
        self.add_span_event(f"{handler_type}.{handler_name}", attributes)


# ------------------------------------------------------------------
# Singleton
# ------------------------------------------------------------------

_observability_manager: ObservabilityManager | None = None


def get_observability_manager() -> ObservabilityManager:
    """Return the global ObservabilityManager singleton (lazy-init)."""
    global _observability_manager

    if _observability_manager is None:
        from cafe_finder.config import settings

        _observability_manager = ObservabilityManager(
            service_name=settings.OTEL_SERVICE_NAME,
            enabled=settings.AGENT_OBSERVABILITY_ENABLED,
        )

    return _observability_manager


def initialize_observability(
    service_name: str = "cafe-finder-mcp",
    enabled: bool = True,
) -> ObservabilityManager:
    """Initialize the global observability manager at startup."""
    global _observability_manager

    _observability_manager = ObservabilityManager(
        service_name=service_name,
        enabled=enabled,
    )

    return _observability_manager
