"""
Place Lookup MCP Server.

Self-contained FastMCP instance exposing the configured place resolver
(Google Places or OpenRouteService).
Mounted into the registry via tool_registry.py.
"""

from fastmcp import FastMCP

from cafe_finder.clients.place_resolver import get_place_resolver
from cafe_finder.infrastructure.trace_decorator import traced
from cafe_finder.schemas.places import PlaceLookupResponse, ResolvedPlace

place_lookup_mcp = FastMCP("place_lookup")


@place_lookup_mcp.tool(
    title="Resolve Place",
    description=(
        "Convert a place name or address into coordinates, restricted to "
        "the configured country. Use this when you need lat/lng for a "
        "location the user mentioned."
    ),
    tags={"places", "geocoding"},
    annotations={
        "title": "Resolve Place",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    },
)
@traced(span_name="mcp.tool.resolve_place", handler_type="tool")
async def resolve_place(query: str) -> PlaceLookupResponse:
    """Resolve a free-text place query.

    Args:
        query: Place name or address (e.g. "Dubai Mall", "Jumeirah Lakes Towers").
    """
    location = await get_place_resolver().resolve(query)
    if location is None:
        return PlaceLookupResponse(
            query=query,
            found=False,
            message=f"No place found for '{query}'.",
        )
    return PlaceLookupResponse(
        query=query,
        found=True,
        place=ResolvedPlace(
            latitude=location.lat,
            longitude=location.lng,
            label=location.address,
        ),
    )
