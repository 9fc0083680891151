"""Unit tests for the airport registry."""

from __future__ import annotations

import math

import pytest

from datastore.location_registry import LocationRegistry
from datastore.reading_store import ReadingStore
from models.errors import InvalidCoordinateError
from models.records import Location, Reading


@pytest.fixture
def store() -> ReadingStore:
    return ReadingStore()


@pytest.fixture
def registry(store: ReadingStore) -> LocationRegistry:
    return LocationRegistry(store)


def test_add_and_find_location(registry: LocationRegistry, store: ReadingStore) -> None:
    added = registry.add_location("AEE", 28.7565, -45.5859)

    found = registry.find_location("AEE")
    assert found == added == Location("AEE", 28.7565, -45.5859)
    assert found is not None and found.latitude == 28.7565
    assert store.get_summary("AEE") is not None


def test_find_missing_location_returns_none(registry: LocationRegistry) -> None:
    assert registry.find_location("AEE") is None


def test_add_location_is_an_upsert(registry: LocationRegistry, store: ReadingStore) -> None:
    registry.add_location("AEE", 28.7565, -45.5859)
    store.ingest("AEE", "wind", Reading(mean=10))

    registry.add_location("AEE", 10.0, 20.0)

    assert registry.list_codes() == {"AEE"}
    found = registry.find_location("AEE")
    assert found is not None and (found.latitude, found.longitude) == (10.0, 20.0)
    summary = store.get_summary("AEE")
    assert summary is not None and not summary.has_any_reading()


@pytest.mark.parametrize(
    "latitude, longitude",
    [(90.1, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
)
def test_add_location_rejects_invalid_coordinates(
    registry: LocationRegistry, store: ReadingStore, latitude: float, longitude: float
) -> None:
    with pytest.raises(InvalidCoordinateError):
        registry.add_location("BAD", latitude, longitude)

    assert registry.find_location("BAD") is None
    assert store.get_summary("BAD") is None


def test_add_location_accepts_extreme_coordinates(registry: LocationRegistry) -> None:
    registry.add_location("NP", 90.0, 180.0)
    registry.add_location("SP", -90.0, -180.0)

    assert registry.list_codes() == {"NP", "SP"}


def test_remove_location_returns_removed_and_drops_summary(
    registry: LocationRegistry, store: ReadingStore
) -> None:
    registry.add_location("AEE", 28.7565, -45.5859)

    removed = registry.remove_location("AEE")

    assert removed == Location("AEE", 28.7565, -45.5859)
    assert registry.find_location("AEE") is None
    assert store.get_summary("AEE") is None


def test_remove_unknown_location_returns_none(registry: LocationRegistry) -> None:
    assert registry.remove_location("NOPE") is None


def test_listings_are_snapshots_in_registration_order(registry: LocationRegistry) -> None:
    registry.add_location("AEE", 28.7565, -45.5859)
    registry.add_location("BCD", -15.5859, 21.7565)

    codes = registry.list_codes()
    locations = registry.list_locations()
    registry.add_location("CDE", 1.0, 1.0)

    assert codes == {"AEE", "BCD"}
    assert [location.code for location in locations] == ["AEE", "BCD"]


def test_query_frequencies_divide_by_distinct_entries(registry: LocationRegistry) -> None:
    for code in ("BOS", "JFK", "EWR"):
        registry.add_location(code, 40.0, -73.0)

    registry.record_location_query("JFK")
    registry.record_location_query("JFK")
    registry.record_location_query("BOS")

    assert registry.query_frequencies() == {"BOS": 0.5, "JFK": 1.0, "EWR": 0.0}


def test_query_frequencies_without_queries_are_zero(registry: LocationRegistry) -> None:
    registry.add_location("BOS", 40.0, -73.0)

    assert registry.query_frequencies() == {"BOS": 0.0}


def test_recording_unknown_code_is_ignored(registry: LocationRegistry) -> None:
    registry.add_location("BOS", 40.0, -73.0)

    registry.record_location_query("NOPE")

    assert registry.query_frequencies() == {"BOS": 0.0}


def test_reset_clears_locations_and_counters(registry: LocationRegistry) -> None:
    registry.add_location("BOS", 40.0, -73.0)
    registry.record_location_query("BOS")

    registry.reset()

    assert registry.list_codes() == set()
    assert registry.query_frequencies() == {}


def test_reset_drops_store_summaries(registry: LocationRegistry, store: ReadingStore) -> None:
    registry.add_location("BOS", 40.0, -73.0)
    store.ingest("BOS", "wind", Reading(mean=22))

    registry.reset()

    assert store.get_summary("BOS") is None
    assert store.fresh_data_count() == 0
