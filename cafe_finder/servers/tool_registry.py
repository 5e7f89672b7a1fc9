"""
MCP Tool Registry.

Aggregates all MCP servers into a single FastMCP instance with namespacing.
Initializes observability and loads the venue catalog on startup.
"""

from loguru import logger
from fastmcp import FastMCP

from cafe_finder.config import settings
from cafe_finder.core.catalog import get_catalog
from cafe_finder.infrastructure.observability import initialize_observability
from cafe_finder.servers.cafe_finder_server import cafe_finder_mcp
from cafe_finder.servers.discovery_session_server import discovery_session_mcp
from cafe_finder.servers.place_lookup_server import place_lookup_mcp
from cafe_finder.servers.prompt_server import prompt_mcp


class McpServersRegistry:
    def __init__(self) -> None:
        self.registry = FastMCP("tool_registry")
        self._is_initialized = False

    async def initialize(self) -> None:
        """Mount all MCP servers into the registry with namespaces."""
        if self._is_initialized:
            return

        logger.info("Initializing MCP tool registry...")

        try:
            initialize_observability(
                service_name=settings.OTEL_SERVICE_NAME,
                enabled=settings.AGENT_OBSERVABILITY_ENABLED,
            )
        except Exception:
            logger.exception(
                "Observability initialization failed. "
                "Tracing will be disabled."
            )
            initialize_observability(enabled=False)

        # Fail fast on a broken catalog rather than on the first tool call.
        catalog = get_catalog()
        logger.info(f"Catalog ready with {len(catalog)} venues")

        self.registry.mount(cafe_finder_mcp, namespace="cafes")
        self.registry.mount(discovery_session_mcp, namespace="session")
        self.registry.mount(place_lookup_mcp, namespace="places")
        self.registry.mount(prompt_mcp, namespace="prompts")

        self._is_initialized = True

        all_tools = await self.registry.list_tools()
        tool_names = [t.name for t in all_tools]
        logger.info(f"Registry initialized with {len(all_tools)} tools: {tool_names}")

        all_prompts = await self.registry.list_prompts()
        prompt_names = [p.name for p in all_prompts]
        logger.info(f"Registry initialized with {len(all_prompts)} prompts: {prompt_names}")

    def get_registry(self) -> FastMCP:
        return self.registry
