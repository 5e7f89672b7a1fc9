import pytest

from cafe_finder.schemas.cafes import NoiseLevel, Venue


def make_venue(venue_id: int = 1, **overrides) -> Venue:
    fields = {
        "id": venue_id,
        "name": f"Cafe {venue_id}",
        "lat": 25.2048,
        "lng": 55.2708,
        "area": "Downtown Dubai",
        "has_wifi": False,
        "has_outlets": False,
        "noise_level": NoiseLevel.MEDIUM,
        "good_for_work": False,
        "good_for_families": False,
        "good_for_friends": False,
        "cozy_score": 3,
        "best_for_work_hours": [],
        "busiest_hours": [],
    }
    fields.update(overrides)
    return Venue(**fields)


@pytest.fixture
def venue_factory():
    return make_venue


@pytest.fixture
def small_catalog() -> list[Venue]:
    """Three venues around Downtown Dubai plus one in Dubai Marina (~20 km away)."""
    return [
        make_venue(1, name="Quiet Corner", noise_level=NoiseLevel.CALM, cozy_score=5,
                   good_for_families=True, busiest_hours=["12:00-14:00"]),
        make_venue(2, name="Laptop Lounge", has_wifi=True, good_for_work=True,
                   lat=25.2100, lng=55.2750, best_for_work_hours=["08:00-12:00"]),
        make_venue(3, name="Party Beans", noise_level=NoiseLevel.LIVELY,
                   good_for_friends=True, lat=25.1972, lng=55.2744,
                   busiest_hours=["19:00-22:00"]),
        make_venue(4, name="Marina Brew", lat=25.0805, lng=55.1403,
                   has_wifi=True, good_for_work=True, cozy_score=4),
    ]
