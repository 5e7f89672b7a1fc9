"""Collaborators the discovery layer calls out to."""

from __future__ import annotations

from typing import Protocol, Sequence

from cafe_finder.schemas.cafes import SearchLocation, Venue
from cafe_finder.schemas.discovery import MapView


class PlaceResolver(Protocol):
    """Turns a free-text place query into a coordinate and display label."""

    async def resolve(self, query: str) -> SearchLocation | None:
        """Return the best match, or None when nothing was found."""
        ...


class MapRenderer(Protocol):
    """Plots an already-filtered list of venues.

    The user's marker selection comes back through
    ``DiscoverySession.select_venue``.
    """

    def render(
        self,
        venues: Sequence[Venue],
        focus: SearchLocation | None = None,
        selected_id: int | None = None,
    ) -> MapView:
        ...
