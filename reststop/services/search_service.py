"""
Structured facility search
Combines the store, radius filter and ranking into one query flow
"""
from typing import List, Optional

from reststop.config import Settings, settings as default_settings
from reststop.models.facility import Facility
from reststop.models.request import GeoPoint, Preferences, StructuredQuery
from reststop.services.geo import within_radius
from reststop.services.ranking import filter_by_preferences, recommend, sort_by_cleanliness_desc
from reststop.services.store import FacilityStore


class SearchService:
    """
    Structured query flow

    Area filter → Free-text filter → Radius filter → Preference filter → Cleanliness ordering
    """

    def __init__(self, store: FacilityStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or default_settings

    def _candidates(
        self,
        origin: Optional[GeoPoint],
        radius_km: Optional[float],
        area_name: Optional[str] = None,
        text: Optional[str] = None,
    ) -> List[Facility]:
        # Step 1: Area name narrows the collection; blank matches everything
        candidates = list(self.store.find_by_area_substring(area_name))

        # Step 2: Free-text search over name, description, address and city
        if text is not None and text.strip():
            matched_ids = {facility.id for facility in self.store.search(text)}
            candidates = [facility for facility in candidates if facility.id in matched_ids]

        # Step 3: Radius filter around the origin
        if origin is not None:
            radius = radius_km if radius_km is not None else self.settings.default_radius_km
            candidates = within_radius(candidates, origin, radius)

        return candidates

    def search(self, query: StructuredQuery) -> List[Facility]:
        candidates = self._candidates(query.origin, query.radius_km, query.area_name, query.text)

        # Step 4: Preferences
        filtered = filter_by_preferences(candidates, query.preferences)

        # Step 5: Cleanest first
        return sort_by_cleanliness_desc(filtered)

    def recommend(
        self,
        preferences: Optional[Preferences],
        origin: Optional[GeoPoint] = None,
        radius_km: Optional[float] = None,
    ) -> List[Facility]:
        """Bounded recommendations, optionally scoped to a radius around ``origin``"""
        return recommend(self._candidates(origin, radius_km), preferences)
