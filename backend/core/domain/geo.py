"""
Distance calculations for location search.

An equirectangular (planar) projection is accurate to well under one
percent for city-scale radii, which is all the geofile search needs.
"""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6_371_000.0
METRES_PER_DEGREE_LAT = math.pi * EARTH_RADIUS_M / 180.0


def planar_distance_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Approximate distance between two lat/lng points in metres.

    Longitude differences are scaled by the cosine of the mean latitude.
    """
    mean_lat = math.radians((lat1 + lat2) / 2.0)
    dx = math.radians(lng2 - lng1) * math.cos(mean_lat)
    dy = math.radians(lat2 - lat1)
    return EARTH_RADIUS_M * math.hypot(dx, dy)


def bounding_box(lat: float, lng: float, radius_m: float) -> tuple[float, float, float, float]:
    """
    Return ``(min_lat, max_lat, min_lng, max_lng)`` enclosing the circle.

    Used as a cheap database pre-filter before the exact distance check.
    """
    dlat = radius_m / METRES_PER_DEGREE_LAT
    cos_lat = max(math.cos(math.radians(lat)), 1e-6)
    dlng = radius_m / (METRES_PER_DEGREE_LAT * cos_lat)
    return lat - dlat, lat + dlat, lng - dlng, lng + dlng
