"""
Response models for the search, chat and directions APIs
Chat replies are built from a tagged response descriptor
"""
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from reststop.models.facility import Facility
from reststop.models.request import GeoPoint


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    intent: Optional[str] = None  # Name of the rule that produced it
    result_count: Optional[int] = None
    top_facility: Optional[Facility] = None


class PlainText(_Descriptor):
    """Reply without a follow-up action"""
    kind: Literal["plain_text"] = "plain_text"


class WithNavigate(_Descriptor):
    """Reply that also asks the map view to re-run ``navigate_query``"""
    kind: Literal["with_navigate"] = "with_navigate"
    navigate_query: str


ResponseDescriptor = Annotated[Union[PlainText, WithNavigate], Field(discriminator="kind")]


class NavigateAction(BaseModel):
    """Action tag rendered as a "Navigate to Map" button"""
    type: Literal["navigate"] = "navigate"
    query: str
    label: str = "Navigate to Map"


class ChatReply(BaseModel):
    """Final chat message returned to the conversational UI"""
    message: str
    action: Optional[NavigateAction] = None
    intent: Optional[str] = None
    result_count: Optional[int] = None


class FacilityListResponse(BaseModel):
    """Facility search response model"""
    success: bool = True
    message: str = "success"
    facilities: List[Facility] = []
    total_count: int = 0


class RouteEstimate(BaseModel):
    """Distance and duration returned by the routing collaborator"""
    distance_km: float
    duration_minutes: int


class DirectionsResponse(BaseModel):
    facility_id: str
    origin: GeoPoint
    destination: GeoPoint
    distance_km: float
    duration_minutes: int
