"""
Café Finder MCP Server.

Self-contained FastMCP instance with stateless café search tools.
Mounted into the registry via tool_registry.py.
"""

from fastmcp import FastMCP

from cafe_finder.clients.place_resolver import get_place_resolver
from cafe_finder.core.catalog import (
    catalog_timezone,
    find_venue,
    get_catalog,
    list_areas as catalog_areas,
)
from cafe_finder.core.geo_filter import current_time_of_day, filter_venues
from cafe_finder.infrastructure.trace_decorator import traced
from cafe_finder.schemas.cafes import (
    AreaListResponse,
    FilterState,
    Mood,
    SearchLocation,
    TimeOfDay,
    VenueCard,
    VenueSearchResponse,
)
from cafe_finder.utils.formatters import format_search_results, format_venue_card

cafe_finder_mcp = FastMCP("cafe_finder")


async def _search_location(
    near: str,
    latitude: float | None,
    longitude: float | None,
) -> SearchLocation | None:
    if (latitude is None) != (longitude is None):
        raise ValueError("latitude and longitude must be given together.")
    if latitude is not None and longitude is not None:
        return SearchLocation(
            lat=latitude,
            lng=longitude,
            address=near or f"{latitude:.5f},{longitude:.5f}",
        )
    if not near.strip():
        return None

    location = await get_place_resolver().resolve(near)
    if location is None:
        raise ValueError(f"No place found for {near!r}.")
    return location


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@cafe_finder_mcp.tool(
    title="Search Cafés",
    description=(
        "Find cafés in the catalog by mood, time of day and location. "
        "Mood is one of Any, Calm, Lively, Cozy, Work, Friends, Family. "
        "When a place name ('near') or coordinates are given, only cafés "
        "within 5 km are returned. Each result says whether the café is "
        "usually busy, likely calm or moderate at the chosen time of day."
    ),
    tags={"cafes", "search", "filter"},
    annotations={
        "title": "Search Cafés",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    },
)
@traced(span_name="mcp.tool.search_cafes", handler_type="tool")
async def search_cafes(
    mood: Mood = Mood.ANY,
    time: TimeOfDay | None = None,
    near: str = "",
    latitude: float | None = None,
    longitude: float | None = None,
) -> VenueSearchResponse:
    """Filter the café catalog.

    Args:
        mood: Mood filter (default "Any", no constraint).
        time: Time of day (Morning, Afternoon, Evening, Late Night). Defaults to now.
        near: Optional place name to search around (e.g. "Dubai Mall").
        latitude: Optional search latitude; takes precedence over "near".
        longitude: Optional search longitude; takes precedence over "near".
    """
    state = FilterState(
        mood=mood,
        time=time or current_time_of_day(tz=catalog_timezone()),
        search_location=await _search_location(near, latitude, longitude),
    )
    return format_search_results(filter_venues(get_catalog(), state), state)


@cafe_finder_mcp.tool(
    title="Get Café",
    description=(
        "Get the full card for one café by id: area, amenities, cozy score "
        "and its expected activity at a time of day."
    ),
    tags={"cafes", "details"},
    annotations={
        "title": "Get Café",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
@traced(span_name="mcp.tool.get_cafe", handler_type="tool")
async def get_cafe(cafe_id: int, time: TimeOfDay | None = None) -> VenueCard:
    """Get one café card.

    Args:
        cafe_id: Café identifier (from search results).
        time: Time of day for the activity hint. Defaults to now.
    """
    venue = find_venue(get_catalog(), cafe_id)
    if venue is None:
        raise ValueError(f"Unknown café id: {cafe_id}")
    return format_venue_card(venue, time or current_time_of_day(tz=catalog_timezone()))


@cafe_finder_mcp.tool(
    title="List Areas",
    description="List the neighbourhoods covered by the café catalog.",
    tags={"cafes", "areas"},
    annotations={
        "title": "List Areas",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
@traced(span_name="mcp.tool.list_areas", handler_type="tool")
async def list_areas() -> AreaListResponse:
    """List catalog areas."""
    areas = catalog_areas(get_catalog())
    return AreaListResponse(count=len(areas), areas=areas)
