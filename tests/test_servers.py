import httpx
import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from cafe_finder.schemas.cafes import SearchLocation
from cafe_finder.servers import (
    cafe_finder_server,
    discovery_session_server,
    place_lookup_server,
)
from cafe_finder.servers.cafe_finder_server import cafe_finder_mcp
from cafe_finder.servers.discovery_session_server import discovery_session_mcp
from cafe_finder.servers.place_lookup_server import place_lookup_mcp
from cafe_finder.servers.prompt_server import prompt_mcp
from cafe_finder.servers.tool_registry import McpServersRegistry

DOWNTOWN = SearchLocation(lat=25.2048, lng=55.2708, address="Downtown Dubai, Dubai")


class FakeResolver:
    def __init__(self, location):
        self.location = location

    async def resolve(self, query):
        return self.location


@pytest.fixture
def resolver(monkeypatch):
    fake = FakeResolver(DOWNTOWN)
    for module in (cafe_finder_server, discovery_session_server, place_lookup_server):
        monkeypatch.setattr(module, "get_place_resolver", lambda: fake)
    return fake


@pytest.fixture
def fresh_sessions(monkeypatch):
    monkeypatch.setattr(discovery_session_server, "_store", None)


# --- cafes ---


async def test_search_cafes_by_mood_and_coordinates():
    async with Client(cafe_finder_mcp) as client:
        result = await client.call_tool("search_cafes", {
            "mood": "Work", "time": "Morning", "latitude": 25.2048, "longitude": 55.2708,
        })
    data = result.structured_content
    assert [v["id"] for v in data["venues"]] == [1, 6, 8, 14]
    assert data["radius_km"] == 5.0
    assert data["count"] == 4


async def test_search_cafes_near_place(resolver):
    async with Client(cafe_finder_mcp) as client:
        result = await client.call_tool("search_cafes", {
            "mood": "Calm", "time": "Morning", "near": "downtown",
        })
    data = result.structured_content
    assert [v["id"] for v in data["venues"]] == [8, 14]
    assert data["search_location"]["address"] == "Downtown Dubai, Dubai"


async def test_search_cafes_unknown_place(resolver):
    resolver.location = None
    async with Client(cafe_finder_mcp) as client:
        with pytest.raises(ToolError, match="No place found"):
            await client.call_tool("search_cafes", {"near": "atlantis"})


async def test_search_cafes_requires_both_coordinates():
    async with Client(cafe_finder_mcp) as client:
        with pytest.raises(ToolError, match="latitude and longitude"):
            await client.call_tool("search_cafes", {"latitude": 25.2})


async def test_get_cafe_activity():
    async with Client(cafe_finder_mcp) as client:
        result = await client.call_tool("get_cafe", {"cafe_id": 6, "time": "Morning"})
    card = result.structured_content
    assert card["name"] == "Gate Avenue Espresso"
    assert card["activity"] == "busy"
    assert card["activity_message"] == "Usually busy mornings"


async def test_get_cafe_unknown_id():
    async with Client(cafe_finder_mcp) as client:
        with pytest.raises(ToolError, match="Unknown café id"):
            await client.call_tool("get_cafe", {"cafe_id": 999})


async def test_list_areas():
    async with Client(cafe_finder_mcp) as client:
        result = await client.call_tool("list_areas", {})
    data = result.structured_content
    assert data["areas"][0] == "Downtown Dubai"
    assert data["count"] == len(set(data["areas"]))


# --- discovery session ---


async def test_session_flow(resolver, fresh_sessions):
    async with Client(discovery_session_mcp) as client:
        view = (await client.call_tool("set_filters", {
            "session_id": "s1", "mood": "Calm", "time": "Morning",
        })).structured_content
        assert [v["id"] for v in view["results"]["venues"]] == [2, 4, 5, 8, 10, 14]

        view = (await client.call_tool("select_cafe", {
            "session_id": "s1", "cafe_id": 5,
        })).structured_content
        assert view["selected_venue_id"] == 5
        assert view["map"]["zoom"] == 16

        view = (await client.call_tool("search_near", {
            "session_id": "s1", "query": "downtown",
        })).structured_content
        assert [v["id"] for v in view["results"]["venues"]] == [8, 14]
        assert view["selected_venue_id"] is None
        assert view["map"]["zoom"] == 14

        view = (await client.call_tool("clear_search_location", {
            "session_id": "s1",
        })).structured_content
        assert view["filters"]["search_location"] is None
        assert view["filters"]["mood"] == "Calm"

        view = (await client.call_tool("reset_filters", {"session_id": "s1"})).structured_content
        assert view["filters"]["mood"] == "Any"
        assert view["results"]["count"] == 14


async def test_session_search_near_not_found_sets_notice(resolver, fresh_sessions):
    resolver.location = None
    async with Client(discovery_session_mcp) as client:
        before = (await client.call_tool("get_discovery_view", {"session_id": "s2"})).structured_content
        view = (await client.call_tool("search_near", {
            "session_id": "s2", "query": "atlantis",
        })).structured_content
    assert view["notice"] == "No place found for 'atlantis'."
    assert view["filters"] == before["filters"]


async def test_session_search_near_without_api_key_sets_notice(monkeypatch, fresh_sessions):
    def unconfigured():
        raise ValueError("GOOGLE_PLACES_API_KEY is not set.")

    monkeypatch.setattr(discovery_session_server, "get_place_resolver", unconfigured)
    async with Client(discovery_session_mcp) as client:
        view = (await client.call_tool("search_near", {
            "session_id": "s5", "query": "marina",
        })).structured_content
    assert view["notice"] == "Place lookup failed for 'marina'. Try again later."
    assert view["filters"]["search_location"] is None


async def test_session_search_near_unreadable_response_sets_notice(resolver, fresh_sessions):
    async def html_body(query):
        return httpx.Response(200, content=b"<html>oops</html>").json()

    resolver.resolve = html_body
    async with Client(discovery_session_mcp) as client:
        view = (await client.call_tool("search_near", {
            "session_id": "s6", "query": "marina",
        })).structured_content
    assert view["notice"] == "Place lookup failed for 'marina'. Try again later."
    assert view["results"]["count"] == 14


async def test_select_cafe_outside_results(fresh_sessions):
    async with Client(discovery_session_mcp) as client:
        await client.call_tool("set_filters", {"session_id": "s3", "mood": "Family"})
        with pytest.raises(ToolError, match="not in the current results"):
            await client.call_tool("select_cafe", {"session_id": "s3", "cafe_id": 1})


async def test_end_session(fresh_sessions):
    async with Client(discovery_session_mcp) as client:
        await client.call_tool("set_filters", {"session_id": "s4", "mood": "Cozy"})
        result = await client.call_tool("end_session", {"session_id": "s4"})
        assert result.structured_content == {"session_id": "s4", "status": "ended"}
        view = (await client.call_tool("get_discovery_view", {"session_id": "s4"})).structured_content
    assert view["filters"]["mood"] == "Any"


# --- places and prompts ---


async def test_resolve_place(resolver):
    async with Client(place_lookup_mcp) as client:
        data = (await client.call_tool("resolve_place", {"query": "downtown"})).structured_content
    assert data["found"] is True
    assert data["place"]["latitude"] == 25.2048


async def test_resolve_place_not_found(resolver):
    resolver.location = None
    async with Client(place_lookup_mcp) as client:
        data = (await client.call_tool("resolve_place", {"query": "atlantis"})).structured_content
    assert data["found"] is False
    assert data["place"] is None


async def test_concierge_prompt():
    async with Client(prompt_mcp) as client:
        result = await client.get_prompt("cafe_concierge_scope", {"user_name": "Sam"})
    assert "helping Sam find a café" in result.messages[0].content.text


# --- registry ---


async def test_registry_mounts_namespaced_tools():
    registry = McpServersRegistry()
    await registry.initialize()
    tools = {t.name for t in await registry.get_registry().list_tools()}
    assert {
        "cafes_search_cafes",
        "cafes_get_cafe",
        "cafes_list_areas",
        "session_get_discovery_view",
        "session_set_filters",
        "session_search_near",
        "session_clear_search_location",
        "session_reset_filters",
        "session_select_cafe",
        "session_end_session",
        "places_resolve_place",
    } <= tools
