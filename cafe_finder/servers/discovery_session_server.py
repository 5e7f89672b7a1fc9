"""
Discovery Session MCP Server.

Session-scoped tools for clients that keep a list + map view in sync with
filter controls. Every tool takes the caller's session_id and returns the
full DiscoveryView after the change.
Mounted into the registry via tool_registry.py.
"""

from fastmcp import FastMCP

from cafe_finder.clients.place_resolver import get_place_resolver
from cafe_finder.config import settings
from cafe_finder.core.catalog import catalog_timezone, get_catalog
from cafe_finder.core.map_view import MarkerMapRenderer
from cafe_finder.core.session import DiscoverySession, SessionStore
from cafe_finder.infrastructure.trace_decorator import traced
from cafe_finder.schemas.cafes import Mood, TimeOfDay
from cafe_finder.schemas.discovery import DiscoveryView, SessionStatusResponse
from cafe_finder.utils.formatters import format_discovery_view

discovery_session_mcp = FastMCP("discovery_session")

# ---------------------------------------------------------------------------
# Lazy singletons
# ---------------------------------------------------------------------------

_store: SessionStore | None = None
_renderer: MarkerMapRenderer | None = None


def _new_session() -> DiscoverySession:
    return DiscoverySession(get_catalog(), tz=catalog_timezone())


def _get_store() -> SessionStore:
    global _store
    if _store is None:
        _store = SessionStore(_new_session, max_sessions=settings.MAX_SESSIONS)
    return _store


def _get_renderer() -> MarkerMapRenderer:
    global _renderer
    if _renderer is None:
        _renderer = MarkerMapRenderer(
            default_center=(
                settings.MAP_DEFAULT_CENTER_LATITUDE,
                settings.MAP_DEFAULT_CENTER_LONGITUDE,
            ),
            default_zoom=settings.MAP_DEFAULT_ZOOM,
        )
    return _renderer


def _view(session_id: str, session: DiscoverySession) -> DiscoveryView:
    return format_discovery_view(session_id, session, _get_renderer())


_SESSION_ANNOTATIONS = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": False,
}

# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@discovery_session_mcp.tool(
    title="Get Discovery View",
    description=(
        "Return the current filters, café list and map payload for a "
        "discovery session. Creates the session with default filters "
        "(Any mood, current time of day, no location) on first use."
    ),
    tags={"session", "view"},
    annotations={"title": "Get Discovery View", **_SESSION_ANNOTATIONS, "readOnlyHint": True},
)
@traced(span_name="mcp.tool.get_discovery_view", handler_type="tool")
async def get_discovery_view(session_id: str) -> DiscoveryView:
    """Get the discovery view for a session.

    Args:
        session_id: Caller-chosen session identifier (e.g. "user-123-tab-1").
    """
    return _view(session_id, _get_store().get(session_id))


@discovery_session_mcp.tool(
    title="Set Filters",
    description=(
        "Change the mood and/or time of day of a discovery session. "
        "Results are recomputed from the full catalog and the selected "
        "café is cleared."
    ),
    tags={"session", "filter"},
    annotations={"title": "Set Filters", **_SESSION_ANNOTATIONS},
)
@traced(span_name="mcp.tool.set_filters", handler_type="tool")
async def set_filters(
    session_id: str,
    mood: Mood | None = None,
    time: TimeOfDay | None = None,
) -> DiscoveryView:
    """Update session filters.

    Args:
        session_id: Caller-chosen session identifier.
        mood: New mood (Any, Calm, Lively, Cozy, Work, Friends, Family). Unchanged if omitted.
        time: New time of day (Morning, Afternoon, Evening, Late Night). Unchanged if omitted.
    """
    session = _get_store().get(session_id)
    session.update_filters(mood=mood, time=time)
    return _view(session_id, session)


@discovery_session_mcp.tool(
    title="Search Near",
    description=(
        "Look up a place name and restrict the session's results to cafés "
        "within 5 km of it. If the place cannot be found the filters stay "
        "as they were and the view carries a notice."
    ),
    tags={"session", "location", "geocoding"},
    annotations={"title": "Search Near", **_SESSION_ANNOTATIONS, "openWorldHint": True},
)
@traced(span_name="mcp.tool.search_near", handler_type="tool")
async def search_near(session_id: str, query: str) -> DiscoveryView:
    """Anchor the session's location filter on a place.

    Args:
        session_id: Caller-chosen session identifier.
        query: Place to search around (e.g. "Dubai Mall", "JLT").
    """
    session = _get_store().get(session_id)
    await session.search_near(query, get_place_resolver)
    return _view(session_id, session)


@discovery_session_mcp.tool(
    title="Clear Search Location",
    description="Remove the location filter from a discovery session.",
    tags={"session", "location"},
    annotations={"title": "Clear Search Location", **_SESSION_ANNOTATIONS},
)
@traced(span_name="mcp.tool.clear_search_location", handler_type="tool")
async def clear_search_location(session_id: str) -> DiscoveryView:
    """Drop the search anchor.

    Args:
        session_id: Caller-chosen session identifier.
    """
    session = _get_store().get(session_id)
    session.clear_search_location()
    return _view(session_id, session)


@discovery_session_mcp.tool(
    title="Reset Filters",
    description="Reset a session to Any mood, the current time of day and no location.",
    tags={"session", "filter"},
    annotations={"title": "Reset Filters", **_SESSION_ANNOTATIONS},
)
@traced(span_name="mcp.tool.reset_filters", handler_type="tool")
async def reset_filters(session_id: str) -> DiscoveryView:
    """Reset all filters.

    Args:
        session_id: Caller-chosen session identifier.
    """
    session = _get_store().get(session_id)
    session.reset_filters()
    return _view(session_id, session)


@discovery_session_mcp.tool(
    title="Select Café",
    description=(
        "Select one café from the session's current results, e.g. after "
        "the user clicks its card or map marker. The map view centers on it."
    ),
    tags={"session", "selection", "map"},
    annotations={"title": "Select Café", **_SESSION_ANNOTATIONS},
)
@traced(span_name="mcp.tool.select_cafe", handler_type="tool")
async def select_cafe(session_id: str, cafe_id: int) -> DiscoveryView:
    """Select a café in the current results.

    Args:
        session_id: Caller-chosen session identifier.
        cafe_id: Id of a café in the current results.
    """
    session = _get_store().get(session_id)
    session.select_venue(cafe_id)
    return _view(session_id, session)


@discovery_session_mcp.tool(
    title="End Session",
    description="Discard a discovery session and its view state.",
    tags={"session"},
    annotations={"title": "End Session", **_SESSION_ANNOTATIONS, "destructiveHint": True},
)
@traced(span_name="mcp.tool.end_session", handler_type="tool")
async def end_session(session_id: str) -> SessionStatusResponse:
    """Discard a session.

    Args:
        session_id: Caller-chosen session identifier.
    """
    _get_store().discard(session_id)
    return SessionStatusResponse(session_id=session_id, status="ended")
