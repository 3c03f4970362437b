"""
Trace decorator for places MCP tools.

Wraps an async tool handler in an OpenTelemetry span that carries the
call arguments, the number of results returned and the elapsed time.

Usage:
    @mcp.tool(...)
    @traced(span_name="mcp.tool.search_places")
    async def search_places(query: str) -> PlaceSearchResponse:
        ...
"""

from __future__ import annotations

import functools
import inspect
import time
from typing import Any, Callable

from loguru import logger

from places_client.infrastructure.observability import get_observability_manager


def _span_attributes(func: Callable, handler_type: str, args: tuple, kwargs: dict) -> dict:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()

    attributes: dict[str, Any] = {
        "mcp.handler.type": handler_type,
        "mcp.handler.name": func.__name__,
    }
    for name, value in bound.arguments.items():
        attributes[f"mcp.{handler_type}.param.{name}"] = str(value)
    return attributes


def traced(span_name: str, handler_type: str = "tool") -> Callable:
    """
    Decorator that runs an async handler inside a named span.

    Args:
        span_name: The span name (e.g. "mcp.tool.get_place_details").
        handler_type: Label recorded on the span and the workflow event.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            observability = get_observability_manager()
            attributes = _span_attributes(func, handler_type, args, kwargs)
            started = time.monotonic()

            with observability.create_span(name=span_name, attributes=attributes) as span:
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    elapsed_ms = round((time.monotonic() - started) * 1000, 2)
                    observability.record_workflow_step(
                        step_name=func.__name__,
                        step_type=handler_type,
                        duration_ms=elapsed_ms,
                        success=False,
                        metadata={"error": type(e).__name__},
                    )
                    logger.error(f"[trace] {span_name} failed after {elapsed_ms}ms: {e}")
                    raise

                elapsed_ms = round((time.monotonic() - started) * 1000, 2)
                count = getattr(result, "count", None)
                if span is not None and count is not None:
                    span.set_attribute(f"mcp.{handler_type}.result.count", count)
                observability.record_workflow_step(
                    step_name=func.__name__,
                    step_type=handler_type,
                    duration_ms=elapsed_ms,
                    success=True,
                )
                logger.debug(f"[trace] {span_name} completed in {elapsed_ms}ms")
                return result

        return wrapper

    return decorator
