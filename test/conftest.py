from datetime import datetime, timezone
from typing import Optional

import pytest

from reststop.models.facility import (
    BusinessCategory,
    BusinessInfo,
    Cleanliness,
    Facility,
    FacilityLocation,
)
from reststop.services.store import FacilityStore


def build_facility(
    name: str = "Test Restroom",
    *,
    facility_id: Optional[str] = None,
    lat: float = 11.0168,
    lng: float = 76.9558,
    address: str = "Town Hall, Coimbatore",
    city: str = "Coimbatore",
    description: str = "",
    score: float = 80,
    accessibility: bool = False,
    baby_changing: bool = False,
    gender_neutral: bool = False,
    category: BusinessCategory = BusinessCategory.OTHER,
) -> Facility:
    return Facility(
        id=facility_id,
        name=name,
        description=description,
        location=FacilityLocation(lat=lat, lng=lng, address=address, city=city, state="Tamil Nadu"),
        cleanliness=Cleanliness(
            score=score,
            last_updated=datetime(2025, 4, 1, tzinfo=timezone.utc),
            reports=3,
        ),
        accessibility=accessibility,
        baby_changing=baby_changing,
        gender_neutral=gender_neutral,
        business_info=BusinessInfo(category=category),
    )


@pytest.fixture
def make_facility():
    return build_facility


@pytest.fixture
def make_store():
    """Build a store whose built-in set is exactly the given facilities."""

    def _make(*facilities: Facility) -> FacilityStore:
        store = FacilityStore(builtin_loader=lambda: list(facilities))
        store.load_builtin()
        return store

    return _make


@pytest.fixture
def dataset_store() -> FacilityStore:
    store = FacilityStore()
    store.load_builtin()
    return store
