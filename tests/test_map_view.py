from cafe_finder.core.map_view import (
    SEARCH_ZOOM,
    SELECTED_ZOOM,
    MarkerMapRenderer,
    maps_link,
)
from cafe_finder.schemas.cafes import SearchLocation

DEFAULT_CENTER = (25.2048, 55.2708)


def _renderer() -> MarkerMapRenderer:
    return MarkerMapRenderer(default_center=DEFAULT_CENTER, default_zoom=13)


def test_markers_follow_result_order(small_catalog):
    view = _renderer().render(small_catalog)
    assert [m.venue_id for m in view.markers] == [1, 2, 3, 4]
    assert view.markers[0].title == "Quiet Corner"
    assert view.markers[0].maps_url == maps_link(25.2048, 55.2708)


def test_no_focus_fits_bounds_of_results(small_catalog):
    view = _renderer().render(small_catalog)
    assert view.center is None
    assert view.zoom is None
    assert view.bounds.south == 25.0805
    assert view.bounds.north == 25.2100
    assert view.bounds.west == 55.1403
    assert view.bounds.east == 55.2750


def test_search_location_centers_map(small_catalog):
    focus = SearchLocation(lat=25.1972, lng=55.2744, address="Dubai Mall")
    view = _renderer().render(small_catalog[:3], focus=focus)
    assert (view.center.latitude, view.center.longitude) == (25.1972, 55.2744)
    assert view.zoom == SEARCH_ZOOM
    assert view.bounds is None


def test_selected_venue_wins_over_focus(small_catalog):
    focus = SearchLocation(lat=25.0, lng=55.0)
    view = _renderer().render(small_catalog, focus=focus, selected_id=2)
    assert (view.center.latitude, view.center.longitude) == (25.2100, 55.2750)
    assert view.zoom == SELECTED_ZOOM
    assert [m.venue_id for m in view.markers if m.selected] == [2]


def test_unknown_selection_is_ignored(small_catalog):
    view = _renderer().render(small_catalog, selected_id=99)
    assert not any(m.selected for m in view.markers)
    assert view.bounds is not None


def test_empty_results_use_default_center():
    view = _renderer().render([])
    assert view.markers == []
    assert (view.center.latitude, view.center.longitude) == DEFAULT_CENTER
    assert view.zoom == 13
