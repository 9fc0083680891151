"""Airports registered at start-up so a fresh service answers queries."""

from __future__ import annotations

from datastore.location_registry import LocationRegistry

SAMPLE_AIRPORTS: tuple[tuple[str, float, float], ...] = (
    ("BOS", 42.364347, -71.005181),
    ("EWR", 40.6925, -74.168667),
    ("JFK", 40.639751, -73.778925),
    ("LGA", 40.777245, -73.872608),
    ("MMU", 40.79935, -74.4148747),
)


def seed_sample_airports(registry: LocationRegistry) -> None:
    for code, latitude, longitude in SAMPLE_AIRPORTS:
        registry.add_location(code, latitude, longitude)
