"""
Google Places API (New) HTTP client.

Used as the place resolver for the "Near" search box:
- POST /v1/places:searchText
"""

from __future__ import annotations

import httpx
from loguru import logger

from cafe_finder.schemas.cafes import SearchLocation

BASE_URL = "https://places.googleapis.com/v1"

SEARCH_FIELD_MASK = ",".join([
    "places.id",
    "places.displayName",
    "places.formattedAddress",
    "places.location",
])


class GooglePlacesClient:
    """Async client for the Google Places API (New)."""

    def __init__(self, api_key: str, region_code: str = "ae") -> None:
        if not api_key:
            raise ValueError("GOOGLE_PLACES_API_KEY is not set.")
        self._region_code = region_code
        self._client = httpx.AsyncClient(
            base_url=BASE_URL,
            headers={
                "X-Goog-Api-Key": api_key,
                "Content-Type": "application/json",
            },
            timeout=10.0,
        )

    async def search_text(self, query: str, max_results: int = 1) -> list[dict]:
        """Text search for places matching a free-text query."""
        body: dict = {
            "textQuery": query,
            "pageSize": min(max_results, 20),
        }
        if self._region_code:
            body["regionCode"] = self._region_code

        logger.debug(f"Text search: query={query!r}, region={self._region_code}")
        response = await self._client.post(
            "/places:searchText",
            json=body,
            headers={"X-Goog-FieldMask": SEARCH_FIELD_MASK},
        )
        response.raise_for_status()
        return response.json().get("places", [])

    async def resolve(self, query: str) -> SearchLocation | None:
        """Resolve a free-text query to the best matching place, if any."""
        if not query.strip():
            return None
        places = await self.search_text(query.strip(), max_results=1)
        for place in places:
            location = place.get("location") or {}
            lat = location.get("latitude")
            lng = location.get("longitude")
            if lat is None or lng is None:
                continue
            label = place.get("formattedAddress") or place.get("displayName", {}).get("text", "")
            return SearchLocation(lat=lat, lng=lng, address=label)
        logger.info(f"No Google Places match for {query!r}")
        return None

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
