from .facility import (
    BusinessCategory,
    BusinessInfo,
    Cleanliness,
    Facility,
    FacilityLocation,
    PartnerTier,
    Review,
)
from .request import GeoPoint, Preferences, StructuredQuery, UtteranceQuery
from .response import ChatReply, NavigateAction, PlainText, ResponseDescriptor, WithNavigate

__all__ = [
    "BusinessCategory",
    "BusinessInfo",
    "Cleanliness",
    "Facility",
    "FacilityLocation",
    "PartnerTier",
    "Review",
    "GeoPoint",
    "Preferences",
    "StructuredQuery",
    "UtteranceQuery",
    "ChatReply",
    "NavigateAction",
    "PlainText",
    "ResponseDescriptor",
    "WithNavigate",
]
