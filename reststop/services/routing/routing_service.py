from abc import ABC, abstractmethod

from reststop.models.request import GeoPoint
from reststop.models.response import RouteEstimate


class RoutingService(ABC):
    """Routing collaborator abstract interface"""

    @abstractmethod
    async def get_route(self, origin: GeoPoint, destination: GeoPoint) -> RouteEstimate:
        """Road distance and travel time between two points

        Raises:
            NoRouteError: the provider failed or found no route
        """
        pass
