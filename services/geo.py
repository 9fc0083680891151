"""Great-circle distance between registered locations."""

from __future__ import annotations

from math import asin, cos, pi, radians, sin, sqrt

from models.records import Location

EARTH_RADIUS_KM = 6372.8
# No two points on the sphere are farther apart than half its circumference.
MAX_DISTANCE_KM = pi * EARTH_RADIUS_KM


def distance_km(a: Location, b: Location) -> float:
    """Haversine distance in kilometres between two locations."""
    delta_lat = radians(b.latitude - a.latitude)
    delta_lon = radians(b.longitude - a.longitude)
    lat_a = radians(a.latitude)
    lat_b = radians(b.latitude)

    h = sin(delta_lat / 2) ** 2 + sin(delta_lon / 2) ** 2 * cos(lat_a) * cos(lat_b)
    # Rounding can push h a hair above 1 for antipodal points.
    return 2 * EARTH_RADIUS_KM * asin(sqrt(min(h, 1.0)))
