"""Convert the raw fuel station dataset into Facility records."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List

from reststop.config.fuel_stations import DATASET_UPDATED_AT, FUEL_STATION_DATASET
from reststop.models.facility import (
    BusinessCategory,
    BusinessInfo,
    Cleanliness,
    Facility,
    FacilityLocation,
    PartnerTier,
    Review,
)


def _rating_to_score(rating: float) -> int:
    # 5-point scale -> 0-100
    return round(rating * 20)


def _convert_station(index: int, station: Dict) -> Facility:
    area = station["location"].split(", ")[0]
    amenities = ["toilet", "sink"]
    if station["tag"] == "clean":
        amenities.extend(["hand_soap", "paper_towels"])

    rounded_rating = round(station["rating"])
    review_date = datetime.fromisoformat(station["review_date"]).replace(tzinfo=timezone.utc)

    return Facility(
        id=f"fuel-{index}",
        name=station["name"],
        description=f"{station['type']} restroom in {area}",
        location=FacilityLocation(
            lat=station["coordinates"]["lat"],
            lng=station["coordinates"]["lng"],
            address=station["location"],
            city="Coimbatore",
            state="Tamil Nadu",
        ),
        amenities=amenities,
        cleanliness=Cleanliness(
            score=_rating_to_score(station["rating"]),
            last_updated=DATASET_UPDATED_AT,
            reports=station["reports"],
        ),
        accessibility=station["accessibility"],
        baby_changing=station["baby_changing"],
        gender_neutral=station["gender_neutral"],
        reviews=[
            Review(
                id=f"review-fuel-{index}",
                author="Dataset User",
                rating=rounded_rating,
                comment=station["review"],
                date=review_date,
                cleanliness=rounded_rating,
            )
        ],
        business_info=BusinessInfo(
            category=BusinessCategory.GAS_STATION,
            partner_tier=PartnerTier.PREMIUM if station["tag"] == "clean" else PartnerTier.STANDARD,
            open_hours="24/7",
        ),
    )


def load_fuel_station_dataset() -> List[Facility]:
    """Built-in facilities, ids ``fuel-1`` .. ``fuel-N`` in dataset order."""
    return [
        _convert_station(index, station)
        for index, station in enumerate(FUEL_STATION_DATASET, start=1)
    ]
