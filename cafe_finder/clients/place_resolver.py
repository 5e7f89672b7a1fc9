"""Lazy place-resolver singleton shared by the MCP servers."""

from __future__ import annotations

from loguru import logger

from cafe_finder.clients.google_places_client import GooglePlacesClient
from cafe_finder.clients.open_route_service_client import OpenRouteServiceClient
from cafe_finder.config import settings
from cafe_finder.core.interfaces import PlaceResolver

PROVIDERS = ("google", "openrouteservice")

_resolver: PlaceResolver | None = None


def build_place_resolver(provider: str) -> PlaceResolver:
    provider = provider.strip().lower()
    if provider == "google":
        return GooglePlacesClient(
            api_key=settings.GOOGLE_PLACES_API_KEY,
            region_code=settings.PLACE_SEARCH_REGION,
        )
    if provider == "openrouteservice":
        return OpenRouteServiceClient(
            api_key=settings.OPEN_ROUTE_SERVICE_API_KEY,
            boundary_country=settings.PLACE_SEARCH_REGION,
        )
    raise ValueError(
        f"Unknown PLACE_RESOLVER {provider!r}. Valid providers: {', '.join(PROVIDERS)}"
    )


def get_place_resolver() -> PlaceResolver:
    global _resolver
    if _resolver is None:
        _resolver = build_place_resolver(settings.PLACE_RESOLVER)
        logger.info(f"Place resolver: {settings.PLACE_RESOLVER}")
    return _resolver
