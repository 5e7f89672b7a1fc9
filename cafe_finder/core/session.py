"""
Discovery session: the view-state a UI keeps around the filter engine.

A session owns the current FilterState and the result list derived from it.
Every control change builds a new FilterState, re-filters the full catalog
and drops the selected venue, which may no longer be in the results. The
selection is kept as a venue id, never as the venue object.
"""

from __future__ import annotations

from collections import OrderedDict
from datetime import tzinfo
from typing import Callable, Sequence

import httpx
from loguru import logger

from cafe_finder.core.geo_filter import current_time_of_day, filter_venues
from cafe_finder.core.interfaces import MapRenderer, PlaceResolver
from cafe_finder.schemas.cafes import FilterState, Mood, TimeOfDay, Venue
from cafe_finder.schemas.discovery import MapView


class DiscoverySession:
    def __init__(
        self,
        catalog: Sequence[Venue],
        tz: tzinfo | None = None,
        filters: FilterState | None = None,
    ) -> None:
        self._catalog = tuple(catalog)
        self._tz = tz
        self.filters: FilterState = filters or self._default_filters()
        self.results: list[Venue] = filter_venues(self._catalog, self.filters)
        self.selected_venue_id: int | None = None
        self.notice: str | None = None

    def _default_filters(self) -> FilterState:
        return FilterState(mood=Mood.ANY, time=current_time_of_day(tz=self._tz))

    def _replace_filters(self, filters: FilterState) -> None:
        self.filters = filters
        self.results = filter_venues(self._catalog, filters)
        self.selected_venue_id = None

    # ------------------------------------------------------------------
    # Filter controls
    # ------------------------------------------------------------------

    def update_filters(
        self,
        mood: Mood | None = None,
        time: TimeOfDay | None = None,
    ) -> None:
        update: dict = {}
        if mood is not None:
            update["mood"] = mood
        if time is not None:
            update["time"] = time
        self.notice = None
        self._replace_filters(self.filters.model_copy(update=update))

    async def search_near(
        self,
        query: str,
        get_resolver: Callable[[], PlaceResolver],
    ) -> bool:
        """Resolve ``query`` and anchor the location filter on it.

        ``get_resolver`` is called inside the guarded block so that a
        misconfigured provider is reported the same way as a failed request.
        Lookup failures leave the filters untouched and set ``notice``.
        """
        try:
            location = await get_resolver().resolve(query)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Place lookup failed for {query!r}: {e}")
            self.notice = f"Place lookup failed for '{query}'. Try again later."
            return False

        if location is None:
            self.notice = f"No place found for '{query}'."
            return False

        self.notice = None
        self._replace_filters(self.filters.model_copy(update={"search_location": location}))
        logger.debug(f"Search anchor set to {location.address!r} ({location.lat}, {location.lng})")
        return True

    def clear_search_location(self) -> None:
        self.notice = None
        self._replace_filters(self.filters.model_copy(update={"search_location": None}))

    def reset_filters(self) -> None:
        self.notice = None
        self._replace_filters(self._default_filters())

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_venue(self, venue_id: int) -> Venue:
        """Mark a venue from the current results as selected."""
        for venue in self.results:
            if venue.id == venue_id:
                self.selected_venue_id = venue_id
                return venue
        raise ValueError(f"Venue {venue_id} is not in the current results.")

    @property
    def selected_venue(self) -> Venue | None:
        if self.selected_venue_id is None:
            return None
        return next((v for v in self.results if v.id == self.selected_venue_id), None)

    def map_view(self, renderer: MapRenderer) -> MapView:
        return renderer.render(
            self.results,
            focus=self.filters.search_location,
            selected_id=self.selected_venue_id,
        )


class SessionStore:
    """In-memory sessions keyed by caller-supplied id, least recently used evicted first."""

    def __init__(
        self,
        factory: Callable[[], DiscoverySession],
        max_sessions: int = 1000,
    ) -> None:
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, DiscoverySession] = OrderedDict()

    def get(self, session_id: str) -> DiscoverySession:
        session = self._sessions.get(session_id)
        if session is None:
            session = self._factory()
            self._sessions[session_id] = session
            logger.debug(f"Created discovery session {session_id!r}")
            while len(self._sessions) > self._max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug(f"Evicted discovery session {evicted!r}")
        else:
            self._sessions.move_to_end(session_id)
        return session

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions
