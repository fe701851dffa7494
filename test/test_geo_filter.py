"""Unit tests for haversine distance and radius filtering."""
import itertools

import pytest

from reststop.errors import InvalidArgument
from reststop.models.request import GeoPoint
from reststop.services.geo import distance, within_radius
from reststop.services.store import load_fuel_station_dataset


def _points():
    return [facility.location for facility in load_fuel_station_dataset()]


def test_distance_is_symmetric_and_zero_on_identity():
    for a, b in itertools.product(_points(), repeat=2):
        assert distance(a, b) == distance(b, a)
    for point in _points():
        assert distance(point, point) == 0


def test_one_degree_of_latitude_on_the_equator():
    assert distance(GeoPoint(lat=0, lng=0), GeoPoint(lat=1, lng=0)) == pytest.approx(111.1949, abs=1e-3)


def test_triangle_inequality_holds():
    for a, b, c in itertools.combinations(_points(), 3):
        assert distance(a, c) <= distance(a, b) + distance(b, c) + 1e-9


def test_facility_at_query_point_is_within_one_km(make_facility):
    facility = make_facility("Vadavalli", lat=11.0272, lng=76.8991, score=88)
    origin = GeoPoint(lat=11.0272, lng=76.8991)

    assert within_radius([facility], origin, 1) == [facility]


def test_within_radius_preserves_input_order(make_facility):
    far = make_facility("Far", lat=11.030, lng=76.9558)
    near = make_facility("Near", lat=11.0170, lng=76.9558)
    middle = make_facility("Middle", lat=11.020, lng=76.9558)
    origin = GeoPoint(lat=11.0168, lng=76.9558)

    result = within_radius([far, near, middle], origin, 5)

    assert [f.name for f in result] == ["Far", "Near", "Middle"]


def test_within_radius_is_monotonic_in_radius():
    facilities = load_fuel_station_dataset()
    origin = GeoPoint(lat=11.0168, lng=76.9558)
    radii = [0.5, 1, 2, 5, 10, 20, 50]

    previous = set()
    for radius in radii:
        current = {f.id for f in within_radius(facilities, origin, radius)}
        assert previous <= current
        previous = current
    assert len(previous) == len(facilities)


@pytest.mark.parametrize("radius", [0, -1, float("nan")])
def test_within_radius_rejects_non_positive_radius(radius):
    with pytest.raises(InvalidArgument):
        within_radius(load_fuel_station_dataset(), GeoPoint(lat=11.0, lng=76.9), radius)
