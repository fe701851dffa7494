"""Cleanliness ranking, preference filtering and bounded recommendations."""
from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, List, Optional

from reststop.errors import InvalidArgument
from reststop.models.facility import Facility
from reststop.models.request import Preferences

RECOMMENDATION_LIMIT = 5

HIGH_TIER_MIN_SCORE = 85
MEDIUM_TIER_MIN_SCORE = 70


class CleanlinessTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def cleanliness_tier(score: float) -> CleanlinessTier:
    """Classify a 0-100 cleanliness score: high >= 85, medium >= 70, else low."""
    if score >= HIGH_TIER_MIN_SCORE:
        return CleanlinessTier.HIGH
    if score >= MEDIUM_TIER_MIN_SCORE:
        return CleanlinessTier.MEDIUM
    return CleanlinessTier.LOW


def sort_by_cleanliness_desc(facilities: Iterable[Facility]) -> List[Facility]:
    # sorted() is stable, so equal scores keep their input order
    return sorted(facilities, key=lambda facility: facility.cleanliness.score, reverse=True)


def _validate_preferences(preferences: Preferences) -> None:
    floor = preferences.min_cleanliness
    if floor is None:
        return
    if not math.isfinite(floor) or floor < 0 or floor > 100:
        raise InvalidArgument(f"min_cleanliness must be within [0, 100], got {floor}")


def _matches(facility: Facility, preferences: Preferences) -> bool:
    if preferences.accessibility and not facility.accessibility:
        return False
    if preferences.baby_changing and not facility.baby_changing:
        return False
    if preferences.gender_neutral and not facility.gender_neutral:
        return False
    if (
        preferences.min_cleanliness is not None
        and facility.cleanliness.score < preferences.min_cleanliness
    ):
        return False
    return True


def filter_by_preferences(
    facilities: Iterable[Facility], preferences: Optional[Preferences]
) -> List[Facility]:
    """Drop facilities violating any set preference; order is preserved."""
    if preferences is None:
        return list(facilities)
    _validate_preferences(preferences)
    return [facility for facility in facilities if _matches(facility, preferences)]


def recommend(
    facilities: Iterable[Facility], preferences: Optional[Preferences]
) -> List[Facility]:
    """Filter, sort by cleanliness and keep the top ``RECOMMENDATION_LIMIT``."""
    qualified = filter_by_preferences(facilities, preferences)
    return sort_by_cleanliness_desc(qualified)[:RECOMMENDATION_LIMIT]
