"""Proximity queries and health statistics over the airport stores."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional

from datastore.location_registry import LocationRegistry
from datastore.reading_store import ReadingStore
from datastore.sample_airports import seed_sample_airports
from models.errors import InvalidRadiusError, UnknownLocationError
from models.records import LocationSummary, MetricKind, Reading
from services.geo import MAX_DISTANCE_KM, distance_km
from settings import DAY_IN_MILLIS, get_settings

logger = logging.getLogger(__name__)


@dataclass
class HealthSnapshot:
    """Service health: fresh data size and query frequency statistics."""

    datasize: int = 0
    iata_freq: Dict[str, float] = field(default_factory=dict)
    radius_freq: List[int] = field(default_factory=list)


class QueryEngine:
    """Answers radius queries by combining the registry and the reading store.

    The engine owns no state of its own; it only records frequency counters
    on the stores it reads from.
    """

    def __init__(
        self,
        registry: LocationRegistry,
        store: ReadingStore,
        freshness_window_ms: int = DAY_IN_MILLIS,
    ) -> None:
        self.registry = registry
        self.store = store
        self.freshness_window_ms = freshness_window_ms

    def ingest_reading(self, code: str, metric: str | MetricKind, reading: Reading) -> bool:
        return self.store.ingest(code, metric, reading)

    def query_by_code(self, code: str, radius: float) -> List[LocationSummary]:
        """Summaries with readings within ``radius`` km of ``code``.

        A zero radius returns only ``code``'s own summary (empty or not).
        Results follow registration order rather than distance.
        """
        if not math.isfinite(radius) or not 0 <= radius <= MAX_DISTANCE_KM:
            raise InvalidRadiusError(radius, MAX_DISTANCE_KM)

        self.registry.record_location_query(code)
        self.store.record_radius_query(radius)

        if radius == 0:
            summary = self.store.get_summary(code)
            return [summary] if summary is not None else []

        reference = self.registry.find_location(code)
        if reference is None:
            raise UnknownLocationError(code)

        results: List[LocationSummary] = []
        for location in self.registry.list_locations():
            if distance_km(reference, location) > radius:
                continue
            summary = self.store.get_summary(location.code)
            if summary is not None and summary.has_any_reading():
                results.append(summary)

        logger.debug(
            "Answered radius query",
            extra={"iata": code, "radius": radius, "result_count": len(results)},
        )
        return results

    def health_snapshot(self) -> HealthSnapshot:
        return HealthSnapshot(
            datasize=self.store.fresh_data_count(window_ms=self.freshness_window_ms),
            iata_freq=self.registry.query_frequencies(),
            radius_freq=self.store.radius_histogram(),
        )

    def reset(self) -> None:
        """Drop every airport, summary and counter."""
        self.registry.reset()
        self.store.reset()


@lru_cache
def build_default_engine(seed: Optional[bool] = None) -> QueryEngine:
    """Factory that wires the engine with fresh in-memory stores."""
    settings = get_settings()
    store = ReadingStore()
    registry = LocationRegistry(store)
    should_seed = settings.seed_sample_airports if seed is None else seed
    if should_seed:
        seed_sample_airports(registry)
    return QueryEngine(
        registry=registry,
        store=store,
        freshness_window_ms=settings.freshness_window_ms,
    )
