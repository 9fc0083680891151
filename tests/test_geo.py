"""Unit tests for the haversine distance."""

from __future__ import annotations

import math

import pytest

from models.records import Location
from services.geo import EARTH_RADIUS_KM, distance_km

BOS = Location("BOS", 42.364347, -71.005181)
JFK = Location("JFK", 40.639751, -73.778925)
LGA = Location("LGA", 40.777245, -73.872608)


def test_distance_to_self_is_zero() -> None:
    assert distance_km(JFK, JFK) == 0.0


@pytest.mark.parametrize("a, b", [(BOS, JFK), (JFK, LGA), (LGA, BOS)])
def test_distance_is_symmetric(a: Location, b: Location) -> None:
    assert distance_km(a, b) == pytest.approx(distance_km(b, a))


def test_one_degree_along_equator() -> None:
    origin = Location("AAA", 0.0, 0.0)
    east = Location("BBB", 0.0, 1.0)

    assert distance_km(origin, east) == pytest.approx(EARTH_RADIUS_KM * math.radians(1))


def test_antipodal_points_are_half_circumference_apart() -> None:
    origin = Location("AAA", 0.0, 0.0)
    antipode = Location("BBB", 0.0, 180.0)

    assert distance_km(origin, antipode) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_new_york_airports_are_close_and_boston_is_not() -> None:
    assert distance_km(JFK, LGA) < 20
    assert 280 < distance_km(JFK, BOS) < 320
