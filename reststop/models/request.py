from typing import Optional
from pydantic import BaseModel


class GeoPoint(BaseModel):
    lat: float
    lng: float


class Preferences(BaseModel):
    """Recommendation preferences; unset options impose no constraint."""
    accessibility: Optional[bool] = None
    baby_changing: Optional[bool] = None
    gender_neutral: Optional[bool] = None
    min_cleanliness: Optional[float] = None


class StructuredQuery(BaseModel):
    origin: Optional[GeoPoint] = None
    radius_km: Optional[float] = None
    preferences: Optional[Preferences] = None
    area_name: Optional[str] = None
    text: Optional[str] = None  # Free-text map search, e.g. a chat navigate query


class RecommendationRequest(BaseModel):
    origin: Optional[GeoPoint] = None
    radius_km: Optional[float] = None
    preferences: Preferences = Preferences()


class UtteranceQuery(BaseModel):
    text: str
    origin: Optional[GeoPoint] = None
    has_location_permission: bool = False


class DirectionsRequest(BaseModel):
    origin: GeoPoint
    facility_id: str
