# Facility ranking package
from .ranking_service import (
    RECOMMENDATION_LIMIT,
    CleanlinessTier,
    cleanliness_tier,
    filter_by_preferences,
    recommend,
    sort_by_cleanliness_desc,
)

__all__ = [
    "RECOMMENDATION_LIMIT",
    "CleanlinessTier",
    "cleanliness_tier",
    "filter_by_preferences",
    "recommend",
    "sort_by_cleanliness_desc",
]
