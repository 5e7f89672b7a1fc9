"""
OpenRouteService API HTTP client.

Forward geocoding only:
- GET /geocode/search
"""

from __future__ import annotations

import httpx
from loguru import logger

from cafe_finder.schemas.cafes import SearchLocation

BASE_URL = "https://api.openrouteservice.org"


class OpenRouteServiceClient:
    """Async geocoding client for the OpenRouteService API."""

    def __init__(self, api_key: str, boundary_country: str | None = "ae") -> None:
        if not api_key:
            raise ValueError("OPEN_ROUTE_SERVICE_API_KEY is not set.")
        self._api_key = api_key
        self._boundary_country = boundary_country
        self._client = httpx.AsyncClient(
            base_url=BASE_URL,
            headers={
                "Authorization": api_key,
                "Accept": "application/json, application/geo+json",
            },
            timeout=15.0,
        )

    async def geocode(self, text: str, size: int = 1) -> dict:
        """Forward geocode: convert an address or place name to coordinates.

        Args:
            text: Address or place name to geocode.
            size: Maximum number of results.
        """
        params: dict = {
            "api_key": self._api_key,
            "text": text,
            "size": min(size, 20),
        }
        if self._boundary_country:
            params["boundary.country"] = self._boundary_country.upper()

        logger.debug(f"Geocode: text={text!r}, size={size}")
        response = await self._client.get("/geocode/search", params=params)
        response.raise_for_status()
        return response.json()

    async def resolve(self, query: str) -> SearchLocation | None:
        """Resolve a free-text query to the first geocoding feature, if any."""
        if not query.strip():
            return None
        data = await self.geocode(query.strip(), size=1)
        for feature in data.get("features", []):
            coords = feature.get("geometry", {}).get("coordinates", [])
            if len(coords) < 2:
                continue
            props = feature.get("properties", {})
            label = props.get("label") or props.get("name") or ""
            # GeoJSON order is [longitude, latitude]
            return SearchLocation(lat=coords[1], lng=coords[0], address=label)
        logger.info(f"No OpenRouteService match for {query!r}")
        return None

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
