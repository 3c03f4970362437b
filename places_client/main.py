"""ASGI entrypoint for the places MCP server (``python -m places_client.main``)."""

import sys

import uvicorn
from loguru import logger

from places_client.config import settings
from places_client.servers.places_server import close_client
from places_client.servers.tool_registry import McpServersRegistry

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())

registry = McpServersRegistry()
_inner_app = registry.get_registry().http_app(stateless_http=True)


def _close_client_on_shutdown(send):
    """Wrap a lifespan ``send`` so the Places HTTP client closes before shutdown completes."""

    async def wrapped(message):
        if message["type"] == "lifespan.shutdown.complete":
            await close_client()
        await send(message)

    return wrapped


async def app(scope, receive, send):
    """Mount the places tools on first request; lifespan events go straight to FastMCP."""
    if scope["type"] == "lifespan":
        await _inner_app(scope, receive, _close_client_on_shutdown(send))
        return
    if not registry._is_initialized:
        await registry.initialize()
    await _inner_app(scope, receive, send)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
