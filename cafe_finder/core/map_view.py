"""Marker / viewport payload for a client-side map."""

from __future__ import annotations

from typing import Sequence

from cafe_finder.schemas.cafes import SearchLocation, Venue
from cafe_finder.schemas.discovery import (
    MapBounds,
    MapCoordinate,
    MapMarker,
    MapView,
)

SELECTED_ZOOM = 16
SEARCH_ZOOM = 14


def maps_link(lat: float, lng: float) -> str:
    return f"https://www.google.com/maps/search/?api=1&query={lat},{lng}"


def _bounds(venues: Sequence[Venue]) -> MapBounds:
    lats = [v.lat for v in venues]
    lngs = [v.lng for v in venues]
    return MapBounds(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))


class MarkerMapRenderer:
    """Builds one marker per venue plus the viewport the map should show.

    Viewport precedence: selected venue, then the search anchor, then the
    bounds of all markers, then the default center.
    """

    def __init__(
        self,
        default_center: tuple[float, float],
        default_zoom: int = 13,
    ) -> None:
        self._default_center = default_center
        self._default_zoom = default_zoom

    def render(
        self,
        venues: Sequence[Venue],
        focus: SearchLocation | None = None,
        selected_id: int | None = None,
    ) -> MapView:
        markers = [
            MapMarker(
                venue_id=v.id,
                title=v.name,
                position=MapCoordinate(latitude=v.lat, longitude=v.lng),
                selected=v.id == selected_id,
                maps_url=maps_link(v.lat, v.lng),
            )
            for v in venues
        ]

        selected = next((v for v in venues if v.id == selected_id), None)
        if selected is not None:
            return MapView(
                markers=markers,
                center=MapCoordinate(latitude=selected.lat, longitude=selected.lng),
                zoom=SELECTED_ZOOM,
            )
        if focus is not None:
            return MapView(
                markers=markers,
                center=MapCoordinate(latitude=focus.lat, longitude=focus.lng),
                zoom=SEARCH_ZOOM,
            )
        if venues:
            return MapView(markers=markers, bounds=_bounds(venues))

        lat, lng = self._default_center
        return MapView(
            markers=markers,
            center=MapCoordinate(latitude=lat, longitude=lng),
            zoom=self._default_zoom,
        )
