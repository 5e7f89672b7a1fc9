"""
@traced decorator for MCP tool and prompt handlers.

Wraps an async handler in an OpenTelemetry span named e.g.
"mcp.tool.search_cafes", with the call arguments as span attributes and a
span event carrying duration and outcome.

Usage:
    @mcp.tool(...)
    @traced(span_name="mcp.tool.search_cafes", handler_type="tool")
    async def search_cafes(mood: Mood = Mood.ANY, ...) -> VenueSearchResponse:
        ...
"""

from __future__ import annotations

import functools
import inspect
import time
from typing import Any, Callable

from loguru import logger

from cafe_finder.infrastructure.observability import get_observability_manager


def traced(
    span_name: str,
    handler_type: str = "tool",
) -> Callable:
    """
    Decorator that wraps an async MCP handler with an OpenTelemetry span.

    Args:
        span_name: The span name (e.g. "mcp.tool.search_cafes").
        handler_type: Either "tool" or "prompt".
    """

    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            observability = get_observability_manager()

            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()
            span_attributes: dict[str, Any] = {
                "mcp.handler.type": handler_type,
                "mcp.handler.name": func.__name__,
            }
            for param_name, param_value in bound.arguments.items():
                span_attributes[f"mcp.{handler_type}.param.{param_name}"] = str(param_value)

            start_time = time.monotonic()
            with observability.create_span(name=span_name, attributes=span_attributes):
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    duration_ms = round((time.monotonic() - start_time) * 1000, 2)
                    observability.record_handler_call(
                        func.__name__, handler_type, duration_ms, success=False, error=str(e)
                    )
                    logger.error(f"[trace] {span_name} failed after {duration_ms:.1f}ms: {e}")
                    raise

                duration_ms = round((time.monotonic() - start_time) * 1000, 2)
                observability.record_handler_call(
                    func.__name__, handler_type, duration_ms, success=True
                )
                logger.debug(f"[trace] {span_name} completed in {duration_ms:.1f}ms")
                return result

        return wrapper

    return decorator
