"""Pydantic models for the venue catalog, filter state and list-view results."""

from __future__ import annotations

from datetime import datetime, tzinfo
from enum import Enum
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

from cafe_finder.config import settings


class NoiseLevel(str, Enum):
    CALM = "calm"
    MEDIUM = "medium"
    LIVELY = "lively"


class Mood(str, Enum):
    """Mood selector. ``ANY`` means no mood constraint."""

    ANY = "Any"
    CALM = "Calm"
    LIVELY = "Lively"
    COZY = "Cozy"
    WORK = "Work"
    FRIENDS = "Friends"
    FAMILY = "Family"


class TimeOfDay(str, Enum):
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    LATE_NIGHT = "Late Night"


def time_of_day_for_hour(hour: int) -> TimeOfDay:
    """Bucket a wall-clock hour (0-23) into a time of day."""
    if 5 <= hour < 12:
        return TimeOfDay.MORNING
    if 12 <= hour < 17:
        return TimeOfDay.AFTERNOON
    if 17 <= hour < 21:
        return TimeOfDay.EVENING
    return TimeOfDay.LATE_NIGHT


def current_time_of_day(now: datetime | None = None, tz: tzinfo | None = None) -> TimeOfDay:
    """Time-of-day bucket for ``now`` (defaults to the current wall clock in ``tz``)."""
    if now is None:
        now = datetime.now(tz)
    return time_of_day_for_hour(now.hour)


def _catalog_time_of_day() -> TimeOfDay:
    return current_time_of_day(tz=ZoneInfo(settings.CAFE_TIMEZONE))


class ActivityLevel(str, Enum):
    """Derived three-way classification of a venue at a time of day."""

    BUSY = "busy"
    CALM = "calm"
    MODERATE = "moderate"


class Venue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Unique venue identifier within the catalog.")
    name: str = Field(description="Display name of the venue.")
    lat: float = Field(description="Latitude in decimal degrees.")
    lng: float = Field(description="Longitude in decimal degrees.")
    area: str = Field(description="Neighbourhood / area label used for grouping.")
    has_wifi: bool = Field(False, description="Venue offers network access.")
    has_outlets: bool = Field(False, description="Venue has power outlets for guests.")
    noise_level: NoiseLevel = Field(description="Typical noise level.")
    good_for_work: bool = Field(False, description="Suitable for focused work.")
    good_for_families: bool = Field(False, description="Suitable for families.")
    good_for_friends: bool = Field(False, description="Suitable for groups of friends.")
    cozy_score: int = Field(ge=1, le=5, description="Coziness rating from 1 to 5.")
    best_for_work_hours: tuple[Any, ...] = Field(
        default=(),
        description='Typically quiet / productive hours, e.g. "09:00-12:00".',
    )
    busiest_hours: tuple[Any, ...] = Field(
        default=(),
        description='Typically busiest hours, e.g. "19:00-22:00". Malformed entries are ignored.',
    )
    image: str | None = Field(None, description="Placeholder image URL.")


class SearchLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(description="Latitude of the search anchor.")
    lng: float = Field(description="Longitude of the search anchor.")
    address: str = Field("", description="Display label of the resolved place.")


class FilterState(BaseModel):
    """Current filter controls. Replaced, never mutated, when a control changes."""

    model_config = ConfigDict(frozen=True)

    mood: Mood = Field(Mood.ANY, description="Selected mood; 'Any' disables the mood filter.")
    time: TimeOfDay = Field(
        default_factory=_catalog_time_of_day,
        description="Selected time-of-day bucket; defaults to the current one in the catalog time zone.",
    )
    search_location: SearchLocation | None = Field(
        None,
        description="Optional anchor; venues farther than the search radius are dropped.",
    )


# --- List-view response models ---


class VenueCard(BaseModel):
    id: int = Field(description="Venue identifier.")
    name: str = Field(description="Display name of the venue.")
    area: str = Field(description="Neighbourhood / area label.")
    latitude: float = Field(description="Latitude coordinate.")
    longitude: float = Field(description="Longitude coordinate.")
    cozy_score: int = Field(description="Coziness rating from 1 to 5.")
    tags: list[str] = Field(default_factory=list, description="Badges such as WiFi, Work, Calm.")
    has_outlets: bool = Field(False, description="Venue has power outlets for guests.")
    activity: ActivityLevel = Field(description="Busy / calm / moderate at the selected time.")
    activity_message: str = Field(description="Human readable activity hint.")
    good_focus_window: bool = Field(
        False,
        description="The selected time falls inside the venue's quiet work hours.",
    )
    distance_km: float | None = Field(
        None,
        description="Distance from the search anchor in kilometres, when one is set.",
    )
    maps_url: str = Field(description="Google Maps link for the venue.")
    image: str | None = Field(None, description="Placeholder image URL.")


class VenueSearchResponse(BaseModel):
    count: int = Field(description="Number of venues returned.")
    mood: Mood = Field(description="Mood filter that was applied.")
    time: TimeOfDay = Field(description="Time-of-day bucket used for activity hints.")
    search_location: SearchLocation | None = Field(None, description="Search anchor, if any.")
    radius_km: float | None = Field(None, description="Search radius when an anchor is set.")
    venues: list[VenueCard] = Field(description="Matching venues in catalog order.")
    message: str | None = Field(None, description="Empty-state message.")


class AreaListResponse(BaseModel):
    count: int = Field(description="Number of distinct areas.")
    areas: list[str] = Field(description="Area labels in catalog order.")
