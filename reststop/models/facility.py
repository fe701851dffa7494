"""
Facility models: restroom records with location, cleanliness and amenities.
Range checks live in the store so a rejected write never touches state.
"""
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class BusinessCategory(str, Enum):
    """Kind of business hosting the restroom"""
    GAS_STATION = "gas_station"
    RESTAURANT = "restaurant"
    CAFE = "cafe"
    SHOPPING_MALL = "shopping_mall"
    PUBLIC = "public"
    OTHER = "other"


class PartnerTier(str, Enum):
    """Partnership level of the hosting business"""
    PREMIUM = "premium"
    STANDARD = "standard"
    NONE = "none"


class FacilityLocation(BaseModel):
    """Geographic position plus postal address"""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float
    address: str = ""
    city: str = ""
    state: str = ""


class Cleanliness(BaseModel):
    """Cleanliness score (0-100) and how many reports produced it"""
    model_config = ConfigDict(frozen=True)

    score: float
    last_updated: datetime
    reports: int = 0


class Review(BaseModel):
    """A single user review"""
    model_config = ConfigDict(frozen=True)

    id: str
    author: str
    rating: int
    comment: str = ""
    date: datetime
    cleanliness: int


class BusinessInfo(BaseModel):
    """Business metadata for partner facilities"""
    model_config = ConfigDict(frozen=True)

    category: BusinessCategory = BusinessCategory.OTHER
    partner_tier: PartnerTier = PartnerTier.NONE
    open_hours: str = ""


class Facility(BaseModel):
    """Restroom facility record"""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None  # Assigned by the store when absent
    name: str
    description: str = ""
    location: FacilityLocation
    amenities: Tuple[str, ...] = ()
    cleanliness: Cleanliness
    accessibility: bool = False
    baby_changing: bool = False
    gender_neutral: bool = False
    reviews: Tuple[Review, ...] = ()
    business_info: BusinessInfo = Field(default_factory=BusinessInfo)

    @property
    def score(self) -> float:
        return self.cleanliness.score
