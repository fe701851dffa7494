"""Tests for the OSRM routing client using httpx's mock transport."""
import asyncio

import httpx
import pytest

from reststop.errors import NoRouteError
from reststop.models.request import GeoPoint
from reststop.services.routing import OSRMRoutingService

ORIGIN = GeoPoint(lat=11.0168, lng=76.9558)
DESTINATION = GeoPoint(lat=11.0352, lng=76.9991)


def _route(handler):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            service = OSRMRoutingService(base_url="http://osrm.test/", profile="driving", client=client)
            return await service.get_route(ORIGIN, DESTINATION)

    return asyncio.run(run())


def test_route_request_uses_lng_lat_order_and_rounds_result():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(
            200,
            json={"code": "Ok", "routes": [{"distance": 5432.1, "duration": 755.0}]},
        )

    estimate = _route(handler)

    assert seen["url"].path == "/route/v1/driving/76.9558,11.0168;76.9991,11.0352"
    assert seen["url"].params["overview"] == "false"
    assert estimate.distance_km == 5.4
    assert estimate.duration_minutes == 13


def test_no_routes_raises():
    def handler(request):
        return httpx.Response(200, json={"code": "NoRoute", "routes": []})

    with pytest.raises(NoRouteError):
        _route(handler)


def test_http_error_status_raises():
    def handler(request):
        return httpx.Response(500, text="upstream down")

    with pytest.raises(NoRouteError):
        _route(handler)


def test_transport_failure_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NoRouteError):
        _route(handler)


def test_invalid_json_raises():
    def handler(request):
        return httpx.Response(200, text="<html>not json</html>")

    with pytest.raises(NoRouteError):
        _route(handler)


def test_non_object_json_raises():
    def handler(request):
        return httpx.Response(200, json=[{"distance": 1000, "duration": 60}])

    with pytest.raises(NoRouteError):
        _route(handler)
