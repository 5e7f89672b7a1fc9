"""Formatting helpers that turn catalog venues into list-view models."""

from typing import Sequence

from cafe_finder.core.geo_filter import (
    SEARCH_RADIUS_KM,
    activity_level,
    distance_km,
    is_productive_at_time,
)
from cafe_finder.core.interfaces import MapRenderer
from cafe_finder.core.map_view import maps_link
from cafe_finder.core.session import DiscoverySession
from cafe_finder.schemas.cafes import (
    ActivityLevel,
    FilterState,
    NoiseLevel,
    SearchLocation,
    TimeOfDay,
    Venue,
    VenueCard,
    VenueSearchResponse,
)
from cafe_finder.schemas.discovery import DiscoveryView

EMPTY_RESULTS_MESSAGE = "No cafés found matching these filters."


def venue_tags(venue: Venue) -> list[str]:
    """Badges in display order."""
    tags = []
    if venue.has_wifi:
        tags.append("WiFi")
    if venue.good_for_work:
        tags.append("Work")
    if venue.good_for_families:
        tags.append("Family")
    if venue.noise_level == NoiseLevel.CALM:
        tags.append("Calm")
    if venue.noise_level == NoiseLevel.LIVELY:
        tags.append("Lively")
    return tags


def activity_message(level: ActivityLevel, time: TimeOfDay) -> str:
    period = f"{time.value.lower()}s"
    if level == ActivityLevel.BUSY:
        return f"Usually busy {period}"
    if level == ActivityLevel.CALM:
        return f"Likely calm {period}"
    return "Moderate activity expected"


def format_venue_card(
    venue: Venue,
    time: TimeOfDay,
    search_location: SearchLocation | None = None,
) -> VenueCard:
    """Format a single venue into a VenueCard model."""
    level = activity_level(venue, time)
    distance = None
    if search_location is not None:
        distance = round(
            distance_km(search_location.lat, search_location.lng, venue.lat, venue.lng), 2
        )

    return VenueCard(
        id=venue.id,
        name=venue.name,
        area=venue.area,
        latitude=venue.lat,
        longitude=venue.lng,
        cozy_score=venue.cozy_score,
        tags=venue_tags(venue),
        has_outlets=venue.has_outlets,
        activity=level,
        activity_message=activity_message(level, time),
        good_focus_window=is_productive_at_time(venue, time),
        distance_km=distance,
        maps_url=maps_link(venue.lat, venue.lng),
        image=venue.image,
    )


def format_search_results(
    venues: Sequence[Venue],
    filter_state: FilterState,
) -> VenueSearchResponse:
    """Format a filtered venue list into a VenueSearchResponse model."""
    anchor = filter_state.search_location
    cards = [format_venue_card(v, filter_state.time, anchor) for v in venues]
    return VenueSearchResponse(
        count=len(cards),
        mood=filter_state.mood,
        time=filter_state.time,
        search_location=anchor,
        radius_km=SEARCH_RADIUS_KM if anchor is not None else None,
        venues=cards,
        message=None if cards else EMPTY_RESULTS_MESSAGE,
    )


def format_discovery_view(
    session_id: str,
    session: DiscoverySession,
    renderer: MapRenderer,
) -> DiscoveryView:
    """Format a session's list view and map view into a DiscoveryView model."""
    return DiscoveryView(
        session_id=session_id,
        filters=session.filters,
        results=format_search_results(session.results, session.filters),
        selected_venue_id=session.selected_venue_id,
        map=session.map_view(renderer),
        notice=session.notice,
    )
