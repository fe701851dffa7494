"""Great-circle distance and radius filtering."""
import math
from typing import Iterable, List, Protocol

from reststop.errors import InvalidArgument
from reststop.models.facility import Facility

EARTH_RADIUS_KM = 6371.0


class LatLng(Protocol):
    lat: float
    lng: float


def distance(a: LatLng, b: LatLng) -> float:
    """Distance between two points in kilometers (Haversine formula)"""
    lat1_rad = math.radians(a.lat)
    lat2_rad = math.radians(b.lat)
    delta_lat = math.radians(b.lat - a.lat)
    delta_lng = math.radians(b.lng - a.lng)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lng / 2) ** 2
    )
    # Clamp rounding noise so asin stays in its domain
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def within_radius(
    facilities: Iterable[Facility], origin: LatLng, radius_km: float
) -> List[Facility]:
    """Facilities within ``radius_km`` of ``origin``, in input order."""
    if not radius_km > 0:
        raise InvalidArgument(f"Radius must be positive, got {radius_km}")

    return [
        facility
        for facility in facilities
        if distance(facility.location, origin) <= radius_km
    ]
