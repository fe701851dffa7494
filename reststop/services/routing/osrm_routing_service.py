"""OSRM-backed routing collaborator used by the directions endpoint."""
import logging
from typing import Dict, Optional

import httpx

from reststop.config import settings
from reststop.errors import NoRouteError
from reststop.models.request import GeoPoint
from reststop.models.response import RouteEstimate
from reststop.services.routing.routing_service import RoutingService

logger = logging.getLogger(__name__)


class OSRMRoutingService(RoutingService):
    """Open Source Routing Machine implementation"""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        profile: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = (base_url or settings.osrm_base_url).rstrip("/")
        self.profile = profile or settings.routing_profile
        self.timeout = timeout if timeout is not None else settings.routing_timeout_s
        self._client = client

    def _build_route_url(self, origin: GeoPoint, destination: GeoPoint) -> str:
        # OSRM expects lng,lat pairs
        coordinates = f"{origin.lng},{origin.lat};{destination.lng},{destination.lat}"
        return f"{self.base_url}/route/v1/{self.profile}/{coordinates}"

    async def get_route(self, origin: GeoPoint, destination: GeoPoint) -> RouteEstimate:
        url = self._build_route_url(origin, destination)
        params = {"overview": "false"}

        try:
            if self._client is not None:
                response = await self._client.get(url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("OSRM returned status %s", e.response.status_code)
            raise NoRouteError(f"Routing API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("OSRM request failed: %s", e)
            raise NoRouteError(f"Failed to get route: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise NoRouteError("Routing API returned invalid JSON") from e

        return self._convert_route_response(data)

    @staticmethod
    def _convert_route_response(data: Dict) -> RouteEstimate:
        """Convert an OSRM route response to a RouteEstimate"""
        if not isinstance(data, dict):
            raise NoRouteError("Routing API returned an unexpected payload")

        routes = data.get("routes") or []
        if data.get("code", "Ok") != "Ok" or not routes:
            raise NoRouteError(f"No route found ({data.get('code', 'unknown')})")

        route = routes[0]
        distance_m = float(route.get("distance", 0.0))
        duration_s = float(route.get("duration", 0.0))

        return RouteEstimate(
            distance_km=round(distance_m / 1000, 1),
            duration_minutes=round(duration_s / 60),
        )
