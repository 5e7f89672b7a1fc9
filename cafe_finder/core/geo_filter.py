"""
Geo / time filtering for the venue catalog.

Pure functions only:
- haversine distance between two coordinates
- time-of-day bucket -> representative hour
- "HH:MM-HH:MM" range parsing and matching
- busy / calm / moderate activity heuristic
- the composite mood + location filter pipeline

Every call recomputes from its inputs; nothing here keeps state between calls.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from loguru import logger

from cafe_finder.schemas.cafes import (
    ActivityLevel,
    FilterState,
    Mood,
    NoiseLevel,
    TimeOfDay,
    Venue,
    current_time_of_day,
    time_of_day_for_hour,
)

EARTH_RADIUS_KM = 6371.0
SEARCH_RADIUS_KM = 5.0

REPRESENTATIVE_HOURS: dict[TimeOfDay, int] = {
    TimeOfDay.MORNING: 9,
    TimeOfDay.AFTERNOON: 14,
    TimeOfDay.EVENING: 19,
    TimeOfDay.LATE_NIGHT: 22,
}

_RANGE_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*-\s*(\d{1,2}):(\d{2})\s*$")


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres (haversine, R = 6371 km)."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


# ---------------------------------------------------------------------------
# Time buckets and ranges
# ---------------------------------------------------------------------------


def representative_hour(time: TimeOfDay) -> int:
    return REPRESENTATIVE_HOURS[time]


@dataclass(frozen=True, slots=True)
class TimeRange:
    """Same-day range; the start is inclusive and the end exclusive."""

    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int

    def contains_hour(self, hour: int) -> bool:
        # Hour granularity: minutes are validated but do not move the boundary.
        return self.start_hour <= hour < self.end_hour


def parse_time_range(text: Any) -> TimeRange | None:
    """Parse ``"HH:MM-HH:MM"``. Returns None for anything malformed, including non-strings."""
    if not isinstance(text, str):
        return None
    match = _RANGE_RE.match(text)
    if match is None:
        return None
    start_h, start_m, end_h, end_m = (int(g) for g in match.groups())
    if not (0 <= start_h <= 23 and 0 <= end_h <= 23):
        return None
    if not (0 <= start_m <= 59 and 0 <= end_m <= 59):
        return None
    return TimeRange(start_h, start_m, end_h, end_m)


def _any_range_contains(ranges: Iterable[Any], hour: int, venue: Venue) -> bool:
    for raw in ranges:
        parsed = parse_time_range(raw)
        if parsed is None:
            logger.debug(f"Skipping malformed time range {raw!r} on venue {venue.id}")
            continue
        if parsed.contains_hour(hour):
            return True
    return False


# ---------------------------------------------------------------------------
# Activity heuristic
# ---------------------------------------------------------------------------


def is_busy_at_time(venue: Venue, time: TimeOfDay) -> bool:
    return _any_range_contains(venue.busiest_hours, representative_hour(time), venue)


def is_calm_at_time(venue: Venue, time: TimeOfDay) -> bool:
    if is_busy_at_time(venue, time):
        return False
    if venue.noise_level == NoiseLevel.LIVELY:
        return False
    return True


def is_productive_at_time(venue: Venue, time: TimeOfDay) -> bool:
    """Whether ``time`` falls inside one of the venue's quiet work windows."""
    return _any_range_contains(venue.best_for_work_hours, representative_hour(time), venue)


def activity_level(venue: Venue, time: TimeOfDay) -> ActivityLevel:
    if is_busy_at_time(venue, time):
        return ActivityLevel.BUSY
    if is_calm_at_time(venue, time):
        return ActivityLevel.CALM
    return ActivityLevel.MODERATE


# ---------------------------------------------------------------------------
# Filter pipeline
# ---------------------------------------------------------------------------

MOOD_PREDICATES: dict[Mood, Callable[[Venue], bool]] = {
    Mood.CALM: lambda v: v.noise_level == NoiseLevel.CALM,
    Mood.LIVELY: lambda v: v.noise_level == NoiseLevel.LIVELY,
    Mood.COZY: lambda v: v.cozy_score >= 4,
    Mood.WORK: lambda v: v.good_for_work and v.has_wifi,
    Mood.FRIENDS: lambda v: v.good_for_friends,
    Mood.FAMILY: lambda v: v.good_for_families,
}


def filter_venues(all_venues: Sequence[Venue], filter_state: FilterState) -> list[Venue]:
    """Apply the location and mood filters, preserving catalog order.

    Always pass the full catalog: results are never derived from a previous
    result set.
    """
    result = list(all_venues)

    anchor = filter_state.search_location
    if anchor is not None:
        result = [
            v for v in result
            if distance_km(anchor.lat, anchor.lng, v.lat, v.lng) <= SEARCH_RADIUS_KM
        ]

    if filter_state.mood != Mood.ANY:
        predicate = MOOD_PREDICATES[filter_state.mood]
        result = [v for v in result if predicate(v)]

    logger.debug(
        f"filter_venues: mood={filter_state.mood.value}, "
        f"anchor={'yes' if anchor else 'no'}, {len(all_venues)} -> {len(result)}"
    )
    return result
