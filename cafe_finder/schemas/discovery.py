"""Pydantic response models for the map view and discovery sessions."""

from pydantic import BaseModel, Field

from cafe_finder.schemas.cafes import FilterState, VenueSearchResponse


class MapCoordinate(BaseModel):
    latitude: float = Field(description="Latitude coordinate.")
    longitude: float = Field(description="Longitude coordinate.")


class MapBounds(BaseModel):
    south: float = Field(description="Southern-most latitude.")
    west: float = Field(description="Western-most longitude.")
    north: float = Field(description="Northern-most latitude.")
    east: float = Field(description="Eastern-most longitude.")


class MapMarker(BaseModel):
    venue_id: int = Field(description="Venue the marker belongs to.")
    title: str = Field(description="Marker tooltip title.")
    position: MapCoordinate = Field(description="Marker position.")
    selected: bool = Field(False, description="Whether this venue is currently selected.")
    maps_url: str = Field(description="Google Maps link for the venue.")


class MapView(BaseModel):
    markers: list[MapMarker] = Field(description="Markers in result order.")
    center: MapCoordinate | None = Field(
        None,
        description="Point to pan to. None when the client should fit 'bounds'.",
    )
    zoom: int | None = Field(None, description="Zoom level to apply with 'center'.")
    bounds: MapBounds | None = Field(
        None,
        description="Bounds covering every marker, used when nothing is in focus.",
    )


class DiscoveryView(BaseModel):
    session_id: str = Field(description="Discovery session identifier.")
    filters: FilterState = Field(description="Current filter state.")
    results: VenueSearchResponse = Field(description="Current list view.")
    selected_venue_id: int | None = Field(None, description="Selected venue, if any.")
    map: MapView = Field(description="Current map view payload.")
    notice: str | None = Field(
        None,
        description="Non-fatal message from the last action (e.g. place not found).",
    )


class SessionStatusResponse(BaseModel):
    session_id: str = Field(description="Discovery session identifier.")
    status: str = Field(description="Operation status (e.g. 'ended').")
