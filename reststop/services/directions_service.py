"""Directions from the caller to a stored facility via the routing collaborator."""
from reststop.models.request import DirectionsRequest, GeoPoint
from reststop.models.response import DirectionsResponse
from reststop.services.routing import RoutingService
from reststop.services.store import FacilityStore


class DirectionsService:
    def __init__(self, store: FacilityStore, routing_service: RoutingService):
        self.store = store
        self.routing_service = routing_service

    async def get_directions(self, request: DirectionsRequest) -> DirectionsResponse:
        facility = self.store.get(request.facility_id)
        destination = GeoPoint(lat=facility.location.lat, lng=facility.location.lng)

        estimate = await self.routing_service.get_route(request.origin, destination)

        return DirectionsResponse(
            facility_id=facility.id,
            origin=request.origin,
            destination=destination,
            distance_km=estimate.distance_km,
            duration_minutes=estimate.duration_minutes,
        )
