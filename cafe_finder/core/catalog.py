"""Static venue catalog, loaded once per process."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence
from zoneinfo import ZoneInfo

from loguru import logger
from pydantic import TypeAdapter

from cafe_finder.config import settings
from cafe_finder.schemas.cafes import Venue

BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "cafes.json"

_venue_list = TypeAdapter(list[Venue])
_catalog: tuple[Venue, ...] | None = None


def load_catalog(path: Path | str | None = None) -> tuple[Venue, ...]:
    """Read and validate a catalog JSON array. Duplicate ids are rejected."""
    source = Path(path) if path else BUNDLED_CATALOG
    venues = _venue_list.validate_json(source.read_bytes())

    seen: set[int] = set()
    for venue in venues:
        if venue.id in seen:
            raise ValueError(f"Duplicate venue id {venue.id} in catalog {source}")
        seen.add(venue.id)

    logger.info(f"Loaded {len(venues)} venues from {source}")
    return tuple(venues)


def get_catalog() -> tuple[Venue, ...]:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(settings.CATALOG_PATH or None)
    return _catalog


def find_venue(venues: Sequence[Venue], venue_id: int) -> Venue | None:
    for venue in venues:
        if venue.id == venue_id:
            return venue
    return None


def list_areas(venues: Sequence[Venue]) -> list[str]:
    """Distinct area labels in first-seen order."""
    return list(dict.fromkeys(v.area for v in venues))


def catalog_timezone() -> ZoneInfo:
    """Time zone the catalog's opening patterns are written in."""
    return ZoneInfo(settings.CAFE_TIMEZONE)
