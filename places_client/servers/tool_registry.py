"""Top-level FastMCP app: serves the places tools under the ``places_`` namespace."""

from loguru import logger
from fastmcp import FastMCP

from places_client.config import settings
from places_client.infrastructure.observability import initialize_observability
from places_client.servers.places_server import places_mcp


class McpServersRegistry:
    def __init__(self) -> None:
        self.registry = FastMCP("places_client")
        self._is_initialized = False

    async def initialize(self) -> None:
        """Set up tracing and mount the places server. Safe to call repeatedly."""
        if self._is_initialized:
            return

        initialize_observability(
            service_name=settings.OTEL_SERVICE_NAME,
            enabled=settings.AGENT_OBSERVABILITY_ENABLED,
        )
        self.registry.mount(places_mcp, namespace="places")
        self._is_initialized = True

        tool_names = [t.name for t in await self.registry.list_tools()]
        logger.info(f"Places MCP server ready with tools: {tool_names}")

    def get_registry(self) -> FastMCP:
        return self.registry
