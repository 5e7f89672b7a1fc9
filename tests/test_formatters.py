from cafe_finder.core.map_view import MarkerMapRenderer
from cafe_finder.core.session import DiscoverySession
from cafe_finder.schemas.cafes import (
    ActivityLevel,
    FilterState,
    Mood,
    NoiseLevel,
    SearchLocation,
    TimeOfDay,
)
from cafe_finder.utils.formatters import (
    EMPTY_RESULTS_MESSAGE,
    activity_message,
    format_discovery_view,
    format_search_results,
    format_venue_card,
    venue_tags,
)


def test_venue_tags_order(venue_factory):
    venue = venue_factory(
        has_wifi=True, good_for_work=True, good_for_families=True, noise_level=NoiseLevel.CALM
    )
    assert venue_tags(venue) == ["WiFi", "Work", "Family", "Calm"]
    assert venue_tags(venue_factory(noise_level=NoiseLevel.LIVELY)) == ["Lively"]
    assert venue_tags(venue_factory()) == []


def test_activity_messages():
    assert activity_message(ActivityLevel.BUSY, TimeOfDay.MORNING) == "Usually busy mornings"
    assert activity_message(ActivityLevel.CALM, TimeOfDay.LATE_NIGHT) == "Likely calm late nights"
    assert activity_message(ActivityLevel.MODERATE, TimeOfDay.EVENING) == "Moderate activity expected"


def test_card_busy_evening(venue_factory):
    venue = venue_factory(noise_level=NoiseLevel.LIVELY, busiest_hours=["19:00-22:00"])
    card = format_venue_card(venue, TimeOfDay.EVENING)
    assert card.activity == ActivityLevel.BUSY
    assert card.activity_message == "Usually busy evenings"
    assert card.distance_km is None


def test_card_moderate_when_lively_but_not_busy(venue_factory):
    venue = venue_factory(noise_level=NoiseLevel.LIVELY, busiest_hours=["19:00-22:00"])
    card = format_venue_card(venue, TimeOfDay.MORNING)
    assert card.activity == ActivityLevel.MODERATE
    assert card.activity_message == "Moderate activity expected"


def test_card_distance_and_focus_window(venue_factory):
    venue = venue_factory(lat=25.25, lng=55.2708, best_for_work_hours=["08:00-12:00"])
    anchor = SearchLocation(lat=25.2048, lng=55.2708, address="Downtown")
    card = format_venue_card(venue, TimeOfDay.MORNING, anchor)
    assert card.distance_km == 5.03
    assert card.good_focus_window is True
    assert card.activity == ActivityLevel.CALM


def test_search_results_with_anchor(small_catalog):
    anchor = SearchLocation(lat=25.2048, lng=55.2708, address="Downtown")
    state = FilterState(mood=Mood.ANY, time=TimeOfDay.MORNING, search_location=anchor)
    response = format_search_results(small_catalog[:2], state)
    assert response.count == 2
    assert response.radius_km == 5.0
    assert response.search_location == anchor
    assert response.message is None
    assert [c.id for c in response.venues] == [1, 2]


def test_search_results_empty_message():
    state = FilterState(mood=Mood.CALM, time=TimeOfDay.EVENING)
    response = format_search_results([], state)
    assert response.count == 0
    assert response.radius_km is None
    assert response.message == EMPTY_RESULTS_MESSAGE


def test_discovery_view(small_catalog):
    session = DiscoverySession(
        small_catalog, filters=FilterState(mood=Mood.WORK, time=TimeOfDay.MORNING)
    )
    session.select_venue(4)
    view = format_discovery_view(
        "abc", session, MarkerMapRenderer(default_center=(25.2048, 55.2708))
    )
    assert view.session_id == "abc"
    assert view.filters.mood == Mood.WORK
    assert [c.id for c in view.results.venues] == [2, 4]
    assert view.selected_venue_id == 4
    assert view.map.zoom == 16
    assert view.notice is None
