# Geospatial filtering package
from .geo_filter import EARTH_RADIUS_KM, distance, within_radius

__all__ = ["EARTH_RADIUS_KM", "distance", "within_radius"]
